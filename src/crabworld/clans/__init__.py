"""Clan bookkeeping: name-based rosters per clan id."""

from crabworld.clans.clan_system import ClanMembershipError, ClanSystem

__all__ = [
    "ClanSystem",
    "ClanMembershipError",
]
