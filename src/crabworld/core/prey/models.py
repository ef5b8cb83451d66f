"""Prey capability protocol and its concrete variants.

Reefs store prey through the Prey protocol only, so any object with
``diet()`` and ``try_escape(crab)`` can live on a reef.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from crabworld.core.crab import Diet

if TYPE_CHECKING:
    from crabworld.core.crab import Crab


@runtime_checkable
class Prey(Protocol):
    """Something a crab can try to eat."""

    def diet(self) -> Diet: ...

    def try_escape(self, crab: Crab) -> bool: ...


@dataclass(slots=True)
class Algae:
    """Plant food. Never escapes."""

    def diet(self) -> Diet:
        return Diet.PLANTS

    def try_escape(self, crab: Crab) -> bool:
        return False


@dataclass(slots=True)
class Clam:
    """Shellfish that cannot move. Never escapes."""

    def diet(self) -> Diet:
        return Diet.SHELLFISH

    def try_escape(self, crab: Crab) -> bool:
        return False


@dataclass(slots=True)
class Minnow:
    """Fish that outswims slower crabs."""

    speed: int

    def diet(self) -> Diet:
        return Diet.FISH

    def try_escape(self, crab: Crab) -> bool:
        """Escape if strictly faster than the hunting crab."""
        return self.speed > crab.speed


@dataclass(slots=True)
class Shrimp:
    """Shellfish that escapes while it still has energy."""

    energy: int

    def diet(self) -> Diet:
        return Diet.SHELLFISH

    def try_escape(self, crab: Crab) -> bool:
        """Spend one energy to escape, or get caught when exhausted."""
        if self.energy > 0:
            self.energy -= 1
            return True
        return False
