"""Pydantic record models for the JSON catalog files."""

from pydantic import BaseModel, ConfigDict, Field

from seaswim.domain.models.rws_location import RwsLocation
from seaswim.domain.models.water_body_type import WaterBodyType
from seaswim.domain.models.weather_station import WeatherStation


class RwsLocationRecord(BaseModel):
    """One entry of the RWS location catalog file."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    latitude: float
    longitude: float
    compartments: list[str] = Field(default_factory=list)
    capabilities: list[str] = Field(default_factory=list)
    water_body_type: str | None = None

    def to_domain(self) -> RwsLocation:
        return RwsLocation(
            id=self.id,
            name=self.name,
            latitude=self.latitude,
            longitude=self.longitude,
            compartments=tuple(self.compartments),
            capabilities=tuple(self.capabilities),
            water_body_type=WaterBodyType.parse(self.water_body_type),
        )

    @classmethod
    def from_domain(cls, location: RwsLocation) -> "RwsLocationRecord":
        return cls(
            id=location.id,
            name=location.name,
            latitude=location.latitude,
            longitude=location.longitude,
            compartments=list(location.compartments),
            capabilities=list(location.capabilities),
            water_body_type=location.water_body_type.value,
        )


class WeatherStationRecord(BaseModel):
    """One entry of a weather station catalog file."""

    model_config = ConfigDict(extra="ignore")

    code: str
    name: str
    latitude: float
    longitude: float

    def to_domain(self) -> WeatherStation:
        return WeatherStation(
            id=self.code, name=self.name, latitude=self.latitude, longitude=self.longitude
        )
