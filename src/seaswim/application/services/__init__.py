"""Application services."""

from seaswim.application.services.capability_location_finder import (
    NearestCapabilityLocationFinder,
)
from seaswim.application.services.fuzzy_name_matcher import FuzzyNameMatcher
from seaswim.application.services.nearest_neighbor_ranker import NearestNeighborRanker
from seaswim.application.services.rws_location_matcher import NearestRwsLocationMatcher
from seaswim.application.services.station_matchers import (
    RainRadarStationMatcher,
    WeatherStationMatcher,
)
from seaswim.application.services.station_name_matcher import StationNameMatcher
from seaswim.application.services.tidal_extrema_detector import TidalExtremaDetector
from seaswim.application.services.tide_service import TideService

__all__ = [
    "FuzzyNameMatcher",
    "NearestCapabilityLocationFinder",
    "NearestNeighborRanker",
    "NearestRwsLocationMatcher",
    "RainRadarStationMatcher",
    "StationNameMatcher",
    "TidalExtremaDetector",
    "TideService",
    "WeatherStationMatcher",
]
