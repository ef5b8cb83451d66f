"""Shared-ownership handles with guarded interior mutability.

Usage:
    reef = Shared(Reef())
    alias = reef.clone()

    with alias.borrow_mut() as r:
        r.add_prey(Clam())

    with reef.borrow() as r:
        assert r.population() == 1
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class BorrowError(RuntimeError):
    """Raised when a borrow overlaps an incompatible active borrow."""

    pass


class _Cell[T]:
    """Single storage slot shared by every handle cloned from one origin."""

    __slots__ = ("value", "readers", "writing")

    def __init__(self, value: T) -> None:
        self.value = value
        self.readers = 0
        self.writing = False


class Shared[T]:
    """Handle onto a value that several holders own together.

    All handles produced by ``clone()`` point at the same cell, so a mutation
    made through one is seen through every other. Access goes through
    ``borrow()`` (any number of readers) or ``borrow_mut()`` (one writer, no
    readers). Read borrows are not enforced as read-only; callers must not
    mutate inside ``borrow()``.
    """

    __slots__ = ("_cell",)

    def __init__(self, value: T) -> None:
        self._cell: _Cell[T] = _Cell(value)

    @classmethod
    def _from_cell(cls, cell: _Cell[T]) -> Shared[T]:
        handle = cls.__new__(cls)
        handle._cell = cell
        return handle

    def clone(self) -> Shared[T]:
        """Return another handle onto the same value."""
        return Shared._from_cell(self._cell)

    def ptr_eq(self, other: Shared[T]) -> bool:
        """Check whether both handles point at the same value."""
        return self._cell is other._cell

    @property
    def value_type(self) -> type[T]:
        """Return the type of the shared value."""
        return type(self._cell.value)

    @contextmanager
    def borrow(self) -> Iterator[T]:
        """Borrow the value for reading.

        Raises:
            BorrowError: If the value is currently mutably borrowed.
        """
        cell = self._cell
        if cell.writing:
            raise BorrowError(f"{self.value_type.__name__} is already mutably borrowed")
        cell.readers += 1
        try:
            yield cell.value
        finally:
            cell.readers -= 1

    @contextmanager
    def borrow_mut(self) -> Iterator[T]:
        """Borrow the value for writing.

        Raises:
            BorrowError: If the value is currently borrowed in any way.
        """
        cell = self._cell
        if cell.writing:
            raise BorrowError(f"{self.value_type.__name__} is already mutably borrowed")
        if cell.readers:
            raise BorrowError(
                f"{self.value_type.__name__} is borrowed by {cell.readers} reader(s)"
            )
        cell.writing = True
        try:
            yield cell.value
        finally:
            cell.writing = False

    def replace(self, value: T) -> T:
        """Swap in a new value for every handle and return the old one.

        Raises:
            BorrowError: If the value is currently borrowed in any way.
        """
        with self.borrow_mut() as old:
            self._cell.value = value
        return old

    def __repr__(self) -> str:
        return f"Shared({self._cell.value!r})"
