"""crabworld: beaches of crab clans and an ocean of shared reefs.

Usage:
    from crabworld import Beach, Color, Crab, Diet, Ocean

    beach = Beach()
    beach.add_crab(Crab("Pinchy", 12, Color.red(), Diet.FISH))
    beach.add_member_to_clan("reds", "Pinchy")

    ocean = Ocean()
    ocean.add_beach(beach)
    reef = ocean.generate_reef(n_minnows=2, n_shrimp=1, n_clams=1, n_algae=3)
    beach.get_crab(0).discover_reef(reef)
    beach.get_crab(0).hunt()
"""

__version__ = "0.1.0"

# Core primitives
from crabworld.core import (
    Algae,
    BorrowError,
    Clam,
    Color,
    Crab,
    Diet,
    Minnow,
    Prey,
    Shared,
    Shrimp,
    SpeedTally,
)

# Clans
from crabworld.clans import ClanMembershipError, ClanSystem

# Beach
from crabworld.beach import Beach, InvalidClanError

# Ocean
from crabworld.ocean import Ocean, Reef

# Config
from crabworld.config import WorldSettings

__all__ = [
    # Version
    "__version__",
    # Core
    "Crab",
    "Color",
    "Diet",
    "Prey",
    "Algae",
    "Clam",
    "Minnow",
    "Shrimp",
    "Shared",
    "BorrowError",
    "SpeedTally",
    # Clans
    "ClanSystem",
    "ClanMembershipError",
    # Beach
    "Beach",
    "InvalidClanError",
    # Ocean
    "Ocean",
    "Reef",
    # Config
    "WorldSettings",
]
