"""Swimming spot repository port."""

from typing import Protocol

from seaswim.domain.models.swimming_spot import SwimmingSpot


class SwimmingSpotRepository(Protocol):
    """Port for reading the curated swimming spots."""

    def find_all(self) -> list[SwimmingSpot]:
        """Return all swimming spots."""
        ...

    def find_by_id(self, spot_id: str) -> SwimmingSpot | None:
        """Find a swimming spot by its slug."""
        ...
