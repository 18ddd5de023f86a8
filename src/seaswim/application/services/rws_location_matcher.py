"""Matches swimming spots to Rijkswaterstaat measurement locations."""

import logging

from seaswim.application.services.candidate_filters import (
    DEFAULT_MAX_DISTANCE_KM,
    CandidateFilterChain,
    NotExcluded,
)
from seaswim.application.services.nearest_neighbor_ranker import (
    DEFAULT_CANDIDATE_LIMIT,
    NearestNeighborRanker,
)
from seaswim.domain.models.match_result import MatchResult
from seaswim.domain.models.rws_location import RwsLocation
from seaswim.domain.models.swimming_spot import SwimmingSpot
from seaswim.domain.ports.exclusion_list import ExclusionList
from seaswim.domain.ports.rws_location_repository import RwsLocationRepository

logger = logging.getLogger(__name__)


class NearestRwsLocationMatcher:
    """Finds the nearest non-excluded RWS location for a swimming spot."""

    def __init__(
        self,
        location_repository: RwsLocationRepository,
        exclusion_list: ExclusionList,
        max_distance_km: float | None = DEFAULT_MAX_DISTANCE_KM,
        precision: int = 1,
    ) -> None:
        """Initialize with the location catalog and exclusion list. None disables the ceiling."""
        self._location_repository = location_repository
        self._ranker: NearestNeighborRanker[RwsLocation] = NearestNeighborRanker(
            CandidateFilterChain(
                predicates=(NotExcluded(exclusion_list),),
                max_distance_km=max_distance_km,
            ),
            precision,
        )

    def find_nearest_location(self, spot: SwimmingSpot) -> MatchResult[RwsLocation] | None:
        """Find the nearest usable RWS location for the spot."""
        result = self._ranker.nearest(spot, self._location_repository.find_all())
        if result is None:
            logger.info(f"No RWS location within range of swimming spot '{spot.id}'")
        return result

    def find_nearest_locations(
        self, spot: SwimmingSpot, limit: int = DEFAULT_CANDIDATE_LIMIT
    ) -> list[MatchResult[RwsLocation]]:
        """Find up to ``limit`` usable RWS locations ordered by distance."""
        return self._ranker.nearest_n(spot, self._location_repository.find_all(), limit)
