"""Shared ownership: handles that alias one mutable value."""

from crabworld.core.shared.wrapper import BorrowError, Shared

__all__ = [
    "Shared",
    "BorrowError",
]
