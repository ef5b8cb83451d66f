"""Beach: owner of a crab population and its clan roster.

Usage:
    beach = Beach()
    beach.add_crab(Crab("Pinchy", 12, Color.red(), Diet.FISH))
    beach.add_crab(Crab("Bob", 8, Color.blue(), Diet.PLANTS))

    beach.add_member_to_clan("reds", "Pinchy")
    beach.add_member_to_clan("blues", "Bob")
    assert beach.get_winner_clan("reds", "blues") == "reds"

    beach.breed_crabs(0, 1, "Junior")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from operator import attrgetter

from crabworld.clans import ClanSystem
from crabworld.config import WorldSettings
from crabworld.core.aggregate import SpeedTally
from crabworld.core.crab import Color, Crab, Diet

logger = logging.getLogger(__name__)


class InvalidClanError(ValueError):
    """Raised when a clan in a competition has no member living on the beach."""

    pass


class Beach:
    """Ordered crab population plus exactly one ClanSystem.

    Insertion order is index order for ``get_crab`` and ``breed_crabs``.
    Clan membership is bookkeeping by name and is never checked against the
    crabs actually on the beach.

    Args:
        settings: World settings (default: loaded from environment).
    """

    def __init__(self, settings: WorldSettings | None = None):
        self._settings = settings or WorldSettings()
        self._crabs: list[Crab] = []
        self._clan_system = ClanSystem(enforce_single_clan=self._settings.enforce_single_clan)
        self._owner: object | None = None

    def claim(self, owner: object) -> None:
        """Record ``owner`` (an ocean) as the sole holder of this beach.

        Raises:
            ValueError: If the beach already belongs to an owner.
        """
        if self._owner is not None:
            raise ValueError("Beach already belongs to an ocean")
        self._owner = owner

    def size(self) -> int:
        """Return the number of crabs on the beach."""
        return len(self._crabs)

    def __len__(self) -> int:
        return len(self._crabs)

    def add_crab(self, crab: Crab) -> None:
        """Take ownership of ``crab``, placing it at the end of the population.

        Raises:
            ValueError: If the crab is already on this or any other beach.
        """
        crab.claim(self)
        self._crabs.append(crab)
        logger.debug(f"Crab {crab.name!r} joined beach (size={len(self._crabs)})")

    def get_crab(self, index: int) -> Crab:
        """Return the crab at ``index``.

        Raises:
            IndexError: If ``index`` is negative or not below ``size()``.
        """
        if not 0 <= index < len(self._crabs):
            raise IndexError(
                f"Crab index {index} out of range for beach of size {len(self._crabs)}"
            )
        return self._crabs[index]

    def crabs(self) -> Iterator[Crab]:
        """Iterate crabs in insertion order."""
        return iter(self._crabs)

    def get_fastest_crab(self) -> Crab | None:
        """Return the fastest crab, the earliest one on ties, or None if empty."""
        return max(self._crabs, key=attrgetter("speed"), default=None)

    def find_crabs_by_name(self, name: str) -> list[Crab]:
        """Return every crab named exactly ``name``, in insertion order."""
        return [crab for crab in self._crabs if crab.name == name]

    def breed_crabs(self, i: int, j: int, name: str) -> Crab:
        """Breed the crabs at ``i`` and ``j`` and append their offspring.

        The child gets the parents' crossed color, a random diet and the
        configured bred speed. Parents stay on the beach.

        Args:
            i: Index of the first parent.
            j: Index of the second parent.
            name: Name of the child.

        Returns:
            The newly appended crab.

        Raises:
            IndexError: If either index is out of bounds.
        """
        first = self.get_crab(i)
        second = self.get_crab(j)
        child = Crab(
            name=name,
            speed=self._settings.bred_crab_speed,
            color=Color.cross(first.color, second.color),
            diet=Diet.random_diet(),
        )
        child.claim(self)
        self._crabs.append(child)
        logger.debug(f"Bred {name!r} from {first.name!r} and {second.name!r}")
        return child

    def get_clan_system(self) -> ClanSystem:
        """Return the clan system owned by this beach."""
        return self._clan_system

    def add_member_to_clan(self, clan_id: str, crab_name: str) -> None:
        """Record ``crab_name`` as a member of ``clan_id``.

        A crab is meant to belong to one clan only. Unless single-clan mode is
        configured, callers are responsible for that rule.
        """
        self._clan_system.add_member(clan_id, crab_name)

    def _first_crab_named(self, name: str) -> Crab | None:
        return next((crab for crab in self._crabs if crab.name == name), None)

    def _clan_tally(self, clan_id: str) -> SpeedTally:
        """Tally the speeds of clan members that resolve to a crab on this beach."""
        speeds: list[int] = []
        unresolved: list[str] = []
        for name in self._clan_system.get_clan_member_names(clan_id):
            crab = self._first_crab_named(name)
            if crab is None:
                unresolved.append(name)
                continue
            speeds.append(crab.speed)

        if unresolved:
            logger.debug(f"Clan {clan_id!r}: skipped members not on beach {unresolved}")
        return SpeedTally.of_speeds(speeds)

    def get_clan_average_speed(self, clan_id: str) -> float | None:
        """Mean speed of the clan's resolved members, or None if none resolve."""
        return self._clan_tally(clan_id).mean

    def get_winner_clan(self, id1: str, id2: str) -> str | None:
        """Decide which of two clans is faster on average.

        Only roster names matching a crab on this beach count towards a clan's
        average; the first crab with a given name supplies its speed.

        Args:
            id1: First clan id.
            id2: Second clan id.

        Returns:
            The id with the strictly higher average speed, or None on a tie.

        Raises:
            InvalidClanError: If either clan has no member on this beach.
        """
        first = self._clan_tally(id1)
        second = self._clan_tally(id2)
        if first.is_empty() or second.is_empty():
            raise InvalidClanError("Invalid clan IDs")

        order = first.compare_mean(second)
        if order > 0:
            return id1
        if order < 0:
            return id2
        return None
