"""Crab entity models: color genetics, diet, and the crab itself.

Usage:
    mother = Crab("Pinchy", speed=3, color=Color.red(), diet=Diet.SHELLFISH)
    father = Crab("Bob", speed=5, color=Color.blue(), diet=Diet.FISH)

    child_color = Color.cross(mother.color, father.color)
    child = Crab("Junior", speed=1, color=child_color, diet=Diet.random_diet())
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crabworld.core.shared import Shared
    from crabworld.ocean.reef import Reef

logger = logging.getLogger(__name__)

_CHANNEL_MAX = 255


@dataclass(frozen=True, slots=True)
class Color:
    """RGB shell color. Each channel is an int in [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= _CHANNEL_MAX:
                raise ValueError(f"Color channel {channel}={value} outside [0, {_CHANNEL_MAX}]")

    @classmethod
    def red(cls) -> Color:
        return cls(_CHANNEL_MAX, 0, 0)

    @classmethod
    def green(cls) -> Color:
        return cls(0, _CHANNEL_MAX, 0)

    @classmethod
    def blue(cls) -> Color:
        return cls(0, 0, _CHANNEL_MAX)

    @staticmethod
    def cross(a: Color, b: Color) -> Color:
        """Genetic cross of two parent colors.

        Args:
            a: First parent's color.
            b: Second parent's color.

        Returns:
            Channel-wise integer mean of both parents.
        """
        return Color((a.r + b.r) // 2, (a.g + b.g) // 2, (a.b + b.b) // 2)


class Diet(Enum):
    """What a crab eats, and what kind of food a prey is."""

    SHELLFISH = auto()
    PLANTS = auto()
    FISH = auto()

    @classmethod
    def random_diet(cls, rng: random.Random | None = None) -> Diet:
        """Pick a diet uniformly at random.

        Args:
            rng: Optional random source for reproducible picks.

        Returns:
            One of the Diet members.
        """
        return (rng or random).choice(list(cls))


@dataclass(slots=True, eq=False)
class Crab:
    """A crab living on a beach.

    Compared by identity: two crabs with the same attributes are still two crabs.
    Names are not unique.
    """

    name: str
    speed: int
    color: Color
    diet: Diet
    _reefs: list[Shared[Reef]] = field(default_factory=list, init=False, repr=False)
    _owner: object | None = field(default=None, init=False, repr=False)

    def claim(self, owner: object) -> None:
        """Record ``owner`` (a beach) as the sole holder of this crab.

        Raises:
            ValueError: If the crab already belongs to an owner.
        """
        if self._owner is not None:
            raise ValueError(f"Crab {self.name!r} is already on a beach")
        self._owner = owner

    def discover_reef(self, reef: Shared[Reef]) -> None:
        """Remember a reef handle so later hunts can visit it."""
        self._reefs.append(reef)

    def reefs(self) -> Iterator[Shared[Reef]]:
        """Iterate discovered reef handles in discovery order."""
        return iter(self._reefs)

    def hunt(self) -> bool:
        """Try to eat one prey from the discovered reefs.

        Visits reefs in discovery order. From each reef the front prey is taken;
        if it suits this crab's diet and fails to escape, it is eaten. Otherwise
        it goes back to the end of its reef and the next reef is tried.

        Returns:
            True if a prey was eaten, False otherwise.

        Raises:
            BorrowError: If a reef is already borrowed elsewhere.
        """
        for handle in self._reefs:
            with handle.borrow_mut() as reef:
                prey = reef.take_prey()
                if prey is None:
                    continue
                if prey.diet() is self.diet and not prey.try_escape(self):
                    logger.debug(f"Crab {self.name!r} ate {type(prey).__name__}")
                    return True
                reef.add_prey(prey)
        return False
