"""Ocean: owner of beaches and tracker of shared reefs.

Usage:
    ocean = Ocean()
    ocean.add_beach(Beach())

    reef = ocean.generate_reef(n_minnows=2, n_shrimp=0, n_clams=0, n_algae=3)
    with reef.borrow_mut() as r:
        r.take_prey()

    # The ocean's own handle sees the same reef
    tracked = next(ocean.reefs())
    with tracked.borrow() as r:
        assert r.population() == 4
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from crabworld.beach import Beach
from crabworld.config import WorldSettings
from crabworld.core.prey import Algae, Clam, Minnow, Shrimp
from crabworld.core.shared import Shared
from crabworld.ocean.reef import Reef

logger = logging.getLogger(__name__)


class Ocean:
    """Beaches owned outright plus reefs held through shared handles.

    Every reef the ocean generates stays tracked for the ocean's lifetime,
    even after a handle to it has been given away.

    Args:
        settings: World settings (default: loaded from environment).
    """

    def __init__(self, settings: WorldSettings | None = None):
        self._settings = settings or WorldSettings()
        self._beaches: list[Beach] = []
        self._reefs: list[Shared[Reef]] = []

    def add_beach(self, beach: Beach) -> None:
        """Take ownership of ``beach``, appending it.

        Raises:
            ValueError: If the beach already belongs to this or another ocean.
        """
        beach.claim(self)
        self._beaches.append(beach)

    def beaches(self) -> Iterator[Beach]:
        return iter(self._beaches)

    def reefs(self) -> Iterator[Shared[Reef]]:
        return iter(self._reefs)

    def generate_reef(
        self, n_minnows: int, n_shrimp: int, n_clams: int, n_algae: int
    ) -> Shared[Reef]:
        """Create a reef stocked with the requested prey and start tracking it.

        Minnows and shrimp get the configured speed and energy.

        Args:
            n_minnows: Number of minnows.
            n_shrimp: Number of shrimp.
            n_clams: Number of clams.
            n_algae: Number of algae.

        Returns:
            A new handle onto the reef; the ocean keeps its own.

        Raises:
            ValueError: If any count is negative.
        """
        counts = {"minnows": n_minnows, "shrimp": n_shrimp, "clams": n_clams, "algae": n_algae}
        negative = {kind: n for kind, n in counts.items() if n < 0}
        if negative:
            raise ValueError(f"Prey counts must be non-negative, got {negative}")

        reef = Reef()
        for _ in range(n_algae):
            reef.add_prey(Algae())
        for _ in range(n_minnows):
            reef.add_prey(Minnow(self._settings.minnow_speed))
        for _ in range(n_shrimp):
            reef.add_prey(Shrimp(self._settings.shrimp_energy))
        for _ in range(n_clams):
            reef.add_prey(Clam())

        handle = Shared(reef)
        self._reefs.append(handle)
        logger.debug(f"Generated reef #{len(self._reefs)} with {counts}")
        return handle.clone()
