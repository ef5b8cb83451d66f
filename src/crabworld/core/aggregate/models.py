"""Speed tally used to rank clans by average crab speed."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SpeedTally:
    """Running total of crab speeds and how many crabs contributed."""

    total: int = 0
    count: int = 0

    @classmethod
    def of_speeds(cls, speeds: Iterable[int]) -> SpeedTally:
        """Fold crab speeds into one tally in a single pass.

        Args:
            speeds: Speeds of the contributing crabs.

        Returns:
            Tally of all speeds; empty if ``speeds`` yields nothing.
        """
        total = 0
        count = 0
        for speed in speeds:
            total += speed
            count += 1
        return cls(total=total, count=count)

    @property
    def mean(self) -> float | None:
        """Arithmetic mean speed, or None for an empty tally."""
        if self.count == 0:
            return None
        return self.total / self.count

    def is_empty(self) -> bool:
        return self.count == 0

    def compare_mean(self, other: SpeedTally) -> int:
        """Compare means exactly via cross-multiplication.

        Returns:
            1 if self's mean is higher, -1 if lower, 0 if equal.

        Raises:
            ValueError: If either tally is empty.
        """
        if self.is_empty() or other.is_empty():
            raise ValueError("Cannot compare the mean of an empty tally")
        lhs = self.total * other.count
        rhs = other.total * self.count
        return (lhs > rhs) - (lhs < rhs)
