"""Domain models for swimming conditions."""

from seaswim.domain.models.coordinate import Coordinate
from seaswim.domain.models.match_result import MatchResult
from seaswim.domain.models.rws_location import RwsLocation
from seaswim.domain.models.swimming_spot import SwimmingSpot
from seaswim.domain.models.tide_event import TideEvent
from seaswim.domain.models.tide_info import TideInfo
from seaswim.domain.models.tide_point import TidePoint
from seaswim.domain.models.tide_type import TideType
from seaswim.domain.models.water_body_type import WaterBodyType
from seaswim.domain.models.weather_station import WeatherStation

__all__ = [
    "Coordinate",
    "MatchResult",
    "RwsLocation",
    "SwimmingSpot",
    "TideEvent",
    "TideInfo",
    "TidePoint",
    "TideType",
    "WaterBodyType",
    "WeatherStation",
]
