"""Aggregation functionality: speed tallies for clan competition."""

from crabworld.core.aggregate.models import SpeedTally

__all__ = [
    "SpeedTally",
]
