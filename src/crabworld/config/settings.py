"""World configuration using Pydantic Settings.

Usage:
    from crabworld.config import WorldSettings

    # Load from environment variables (CRABWORLD_*)
    settings = WorldSettings()

    # Or override with explicit values
    settings = WorldSettings(minnow_speed=30, enforce_single_clan=True)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class WorldSettings(BaseSettings):  # type: ignore[misc]
    """Tunable constants for beaches and oceans.

    Attributes:
        minnow_speed: Speed given to every minnow a generated reef holds.
        shrimp_energy: Energy given to every shrimp a generated reef holds.
        bred_crab_speed: Speed of a newly bred crab.
        enforce_single_clan: Reject adding a crab name to a second clan.

    Environment Variables:
        CRABWORLD_MINNOW_SPEED
        CRABWORLD_SHRIMP_ENERGY
        CRABWORLD_BRED_CRAB_SPEED
        CRABWORLD_ENFORCE_SINGLE_CLAN
    """

    model_config = SettingsConfigDict(
        env_prefix="CRABWORLD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    minnow_speed: int = 25
    shrimp_energy: int = 1
    bred_crab_speed: int = 1
    enforce_single_clan: bool = False
