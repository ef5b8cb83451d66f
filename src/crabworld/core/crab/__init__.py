"""Crab functionality: the crab entity, its color genetics and diet."""

from crabworld.core.crab.models import Color, Crab, Diet

__all__ = [
    "Color",
    "Crab",
    "Diet",
]
