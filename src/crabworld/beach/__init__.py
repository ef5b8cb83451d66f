"""Beach: crab population, breeding, and clan competition."""

from crabworld.beach.beach import Beach, InvalidClanError

__all__ = [
    "Beach",
    "InvalidClanError",
]
