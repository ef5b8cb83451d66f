"""Prey functionality: capability protocol and concrete prey kinds."""

from crabworld.core.prey.models import Algae, Clam, Minnow, Prey, Shrimp

__all__ = [
    "Prey",
    "Algae",
    "Clam",
    "Minnow",
    "Shrimp",
]
