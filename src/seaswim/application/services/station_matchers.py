"""Coordinate-based weather station matchers."""

import logging
from dataclasses import dataclass

from seaswim.application.services.candidate_filters import (
    DEFAULT_MAX_DISTANCE_KM,
    CandidateFilterChain,
)
from seaswim.application.services.nearest_neighbor_ranker import (
    DEFAULT_CANDIDATE_LIMIT,
    NearestNeighborRanker,
)
from seaswim.domain.contracts.locatable import Locatable
from seaswim.domain.models.coordinate import Coordinate
from seaswim.domain.models.match_result import MatchResult
from seaswim.domain.models.weather_station import WeatherStation
from seaswim.domain.ports.station_repository import WeatherStationRepository

logger = logging.getLogger(__name__)

STATION_DISTANCE_PRECISION = 1


@dataclass(frozen=True)
class _CoordinateQuery:
    """Anonymous query point for raw coordinate lookups."""

    latitude: float
    longitude: float
    id: str = ""
    name: str = ""

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class WeatherStationMatcher:
    """Finds the nearest KNMI weather station for a location, spot or coordinate.

    Weather stations are sparse, so no distance ceiling applies unless one is
    configured.
    """

    def __init__(
        self,
        station_repository: WeatherStationRepository,
        max_distance_km: float | None = None,
        precision: int = STATION_DISTANCE_PRECISION,
    ) -> None:
        """Initialize with a station catalog. No distance ceiling unless one is given."""
        self._station_repository = station_repository
        self._ranker: NearestNeighborRanker[WeatherStation] = NearestNeighborRanker(
            CandidateFilterChain(max_distance_km=max_distance_km), precision
        )

    def find_nearest_station(self, source: Locatable) -> MatchResult[WeatherStation] | None:
        """Find the nearest station to an RWS location or swimming spot."""
        stations = self._station_repository.find_all()
        if not stations:
            logger.debug("Weather station catalog is empty")
            return None
        return self._ranker.nearest(source, stations)

    def find_nearest_stations(
        self, source: Locatable, limit: int = DEFAULT_CANDIDATE_LIMIT
    ) -> list[MatchResult[WeatherStation]]:
        """Find up to ``limit`` stations ordered by distance."""
        return self._ranker.nearest_n(source, self._station_repository.find_all(), limit)

    def find_nearest_by_coordinates(
        self, latitude: float, longitude: float
    ) -> MatchResult[WeatherStation] | None:
        """Find the nearest station to a raw coordinate."""
        return self.find_nearest_station(_CoordinateQuery(latitude, longitude))


class RainRadarStationMatcher(WeatherStationMatcher):
    """Finds the nearest Buienradar station.

    Buienradar data is used for local wind conditions, so stations beyond the
    short-range ceiling are discarded.
    """

    def __init__(
        self,
        station_repository: WeatherStationRepository,
        max_distance_km: float | None = DEFAULT_MAX_DISTANCE_KM,
        precision: int = STATION_DISTANCE_PRECISION,
    ) -> None:
        """Initialize with the Buienradar catalog and a 20 km ceiling by default."""
        super().__init__(station_repository, max_distance_km, precision)
