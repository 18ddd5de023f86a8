"""Rijkswaterstaat measurement location domain model."""

from dataclasses import dataclass, field, replace

from seaswim.domain.models.coordinate import Coordinate
from seaswim.domain.models.water_body_type import WaterBodyType


@dataclass(frozen=True)
class RwsLocation:
    """A Rijkswaterstaat measurement location.

    Locations are refreshed from the RWS catalog and never mutated in place;
    reclassifying the water body produces a new instance.
    """

    id: str
    name: str
    latitude: float
    longitude: float
    compartments: tuple[str, ...] = ()  # Where is measured, e.g. "OW" (surface water)
    capabilities: tuple[str, ...] = ()  # What is measured, e.g. "T", "WATHTE", "Hm0"
    water_body_type: WaterBodyType = field(default=WaterBodyType.UNKNOWN)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)

    def has_capability(self, capability: str) -> bool:
        """Check whether the location reports the given measurement code (exact match)."""
        return capability in self.capabilities

    def with_water_body_type(self, water_body_type: WaterBodyType) -> "RwsLocation":
        """Return a copy of this location classified as the given water body type."""
        return replace(self, water_body_type=water_body_type)
