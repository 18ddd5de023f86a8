"""Weather station domain model."""

from dataclasses import dataclass

from seaswim.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class WeatherStation:
    """A station of the KNMI or Buienradar weather network."""

    id: str  # Station code, e.g. "260" (KNMI) or "6260" (Buienradar)
    name: str
    latitude: float
    longitude: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)
