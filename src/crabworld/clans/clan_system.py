"""Clan roster service.

ClanSystem is a stateful service mapping clan ids to ordered rosters of crab
names. It knows nothing about Crab objects: membership is a name match only.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ClanMembershipError(ValueError):
    """Raised in single-clan mode when a name already belongs to another clan."""

    pass


class ClanSystem:
    """Clan id → ordered roster of member names.

    Unknown clan ids read as empty rosters. Duplicate names within one roster
    are kept. By default nothing stops a name from joining two clans; pass
    ``enforce_single_clan=True`` to reject that.

    Args:
        enforce_single_clan: Reject a name already on a different clan's roster.
    """

    def __init__(self, enforce_single_clan: bool = False) -> None:
        self._clans: dict[str, list[str]] = {}
        self._enforce_single_clan = enforce_single_clan

    @property
    def enforce_single_clan(self) -> bool:
        return self._enforce_single_clan

    def clan_ids(self) -> list[str]:
        """All clan ids that have ever received a member, sorted."""
        return sorted(self._clans)

    def get_clan_member_names(self, clan_id: str) -> list[str]:
        """Return a copy of the roster for ``clan_id``.

        Args:
            clan_id: Clan to look up.

        Returns:
            Member names in insertion order, or an empty list for unknown clans.
        """
        return list(self._clans.get(clan_id, ()))

    def get_clan_count(self) -> int:
        """Return the number of clans currently in existence."""
        return len(self._clans)

    def add_member(self, clan_id: str, name: str) -> None:
        """Append ``name`` to the roster of ``clan_id``, creating it if absent.

        Args:
            clan_id: Clan to join.
            name: Crab name to record.

        Raises:
            ClanMembershipError: In single-clan mode, if ``name`` is already on
                a different clan's roster.
        """
        if self._enforce_single_clan:
            current = self.clan_of(name)
            if current is not None and current != clan_id:
                raise ClanMembershipError(
                    f"Crab {name!r} already belongs to clan {current!r}, cannot join {clan_id!r}"
                )
        self._clans.setdefault(clan_id, []).append(name)
        logger.debug(f"Added {name!r} to clan {clan_id!r}")

    def add_member_to_clan(self, clan_id: str, name: str) -> None:
        """Alias of :meth:`add_member` under the beach-facing name."""
        self.add_member(clan_id, name)

    def get_clan_member_count(self, clan_id: str) -> int:
        """Return the roster length for ``clan_id``, 0 if unknown."""
        return len(self._clans.get(clan_id, ()))

    def get_largest_clan_id(self) -> str | None:
        """Return the id of the clan with the longest roster.

        Ties resolve to the lexicographically smallest id.

        Returns:
            Clan id, or None if no clans exist.
        """
        if not self._clans:
            return None
        clan_id, _ = min(self._clans.items(), key=lambda item: (-len(item[1]), item[0]))
        return clan_id

    def clan_of(self, name: str) -> str | None:
        """Return the first clan id, in sorted order, whose roster holds ``name``."""
        for clan_id in sorted(self._clans):
            if name in self._clans[clan_id]:
                return clan_id
        return None

    def __repr__(self) -> str:
        return f"ClanSystem(clans={self._clans!r})"
