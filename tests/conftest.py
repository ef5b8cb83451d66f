"""Shared test fixtures."""

import pytest

from crabworld import Beach, Color, Crab, Diet, Ocean, WorldSettings


@pytest.fixture
def settings():
    """Default settings, isolated from any local .env file."""
    return WorldSettings(_env_file=None)


@pytest.fixture
def beach(settings):
    """Fresh, empty Beach."""
    return Beach(settings=settings)


@pytest.fixture
def ocean(settings):
    """Fresh, empty Ocean."""
    return Ocean(settings=settings)


@pytest.fixture
def make_crab():
    """Factory for crabs where only name and speed matter."""

    def _make(name: str, speed: int = 1, diet: Diet = Diet.SHELLFISH) -> Crab:
        return Crab(name=name, speed=speed, color=Color(10, 20, 30), diet=diet)

    return _make
