"""Domain layer - core business logic and models."""

from seaswim.domain.models import (
    Coordinate,
    MatchResult,
    RwsLocation,
    SwimmingSpot,
    TideEvent,
    TideInfo,
    TidePoint,
    TideType,
    WaterBodyType,
    WeatherStation,
)
from seaswim.domain.ports import (
    ExclusionList,
    RwsLocationRepository,
    SwimmingSpotRepository,
    TideSampleSource,
    WeatherStationRepository,
)

__all__ = [
    "Coordinate",
    "ExclusionList",
    "MatchResult",
    "RwsLocation",
    "RwsLocationRepository",
    "SwimmingSpot",
    "SwimmingSpotRepository",
    "TideEvent",
    "TideInfo",
    "TidePoint",
    "TideSampleSource",
    "TideType",
    "WaterBodyType",
    "WeatherStation",
    "WeatherStationRepository",
]
