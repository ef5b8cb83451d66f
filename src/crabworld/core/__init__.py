"""Core functionalities: entity models and stateless primitives.

Architecture Note:
    core/ holds the crab and prey models plus general-purpose building blocks
    (shared handles, aggregation). Stateful services that own collections of
    these live in clans/, beach/, and ocean/.
"""

from crabworld.core.aggregate import SpeedTally
from crabworld.core.crab import Color, Crab, Diet
from crabworld.core.prey import Algae, Clam, Minnow, Prey, Shrimp
from crabworld.core.shared import BorrowError, Shared

__all__ = [
    # Crab
    "Crab",
    "Color",
    "Diet",
    # Prey
    "Prey",
    "Algae",
    "Clam",
    "Minnow",
    "Shrimp",
    # Shared
    "Shared",
    "BorrowError",
    # Aggregate
    "SpeedTally",
]
