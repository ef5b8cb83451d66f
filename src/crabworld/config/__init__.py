"""Configuration module using Pydantic Settings.

Provides typed world configuration with environment variable support.

Usage:
    from crabworld.config import WorldSettings

    settings = WorldSettings(minnow_speed=30)
"""

from crabworld.config.settings import WorldSettings

__all__ = [
    "WorldSettings",
]
