"""Ports (interfaces) for the ports-and-adapters architecture."""

from seaswim.domain.ports.exclusion_list import ExclusionList
from seaswim.domain.ports.rws_location_repository import RwsLocationRepository
from seaswim.domain.ports.station_repository import WeatherStationRepository
from seaswim.domain.ports.swimming_spot_repository import SwimmingSpotRepository
from seaswim.domain.ports.tide_sample_source import TideSampleSource

__all__ = [
    "ExclusionList",
    "RwsLocationRepository",
    "SwimmingSpotRepository",
    "TideSampleSource",
    "WeatherStationRepository",
]
