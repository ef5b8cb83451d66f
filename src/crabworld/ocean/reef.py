"""Reef: a queue of prey."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from crabworld.core.prey import Prey


class Reef:
    """Ordered collection of prey. Taken from the front, returned to the back."""

    def __init__(self) -> None:
        self._prey: deque[Prey] = deque()

    def add_prey(self, prey: Prey) -> None:
        self._prey.append(prey)

    def take_prey(self) -> Prey | None:
        """Remove and return the front prey, or None if the reef is empty."""
        if not self._prey:
            return None
        return self._prey.popleft()

    def population(self) -> int:
        return len(self._prey)

    def __len__(self) -> int:
        return len(self._prey)

    def __iter__(self) -> Iterator[Prey]:
        return iter(self._prey)

    def __repr__(self) -> str:
        return f"Reef(population={len(self._prey)})"
