"""RWS location repository port."""

from typing import Protocol

from seaswim.domain.models.rws_location import RwsLocation


class RwsLocationRepository(Protocol):
    """Port for reading the catalog of Rijkswaterstaat measurement locations."""

    def find_all(self) -> list[RwsLocation]:
        """Return the current catalog snapshot."""
        ...

    def find_by_id(self, location_id: str) -> RwsLocation | None:
        """Find a location by its identifier."""
        ...
