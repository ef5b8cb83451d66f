"""Ocean: beaches and shared reefs of prey."""

from crabworld.ocean.ocean import Ocean
from crabworld.ocean.reef import Reef

__all__ = [
    "Ocean",
    "Reef",
]
