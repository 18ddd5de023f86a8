"""Finds nearby RWS locations that report a given measurement.

Some measurements (wave height, wave period, wave direction) are only taken
at a handful of offshore stations. When a location lacks one, the nearest
location on the same kind of water that does report it is used instead.
"""

from collections.abc import Iterable

from seaswim.application.services.candidate_filters import (
    DEFAULT_MAX_DISTANCE_KM,
    CandidateFilterChain,
    HasCapability,
    NotExcluded,
    not_self,
    same_water_body_type,
)
from seaswim.application.services.nearest_neighbor_ranker import (
    DEFAULT_CANDIDATE_LIMIT,
    NearestNeighborRanker,
)
from seaswim.domain.models.match_result import MatchResult
from seaswim.domain.models.rws_location import RwsLocation
from seaswim.domain.ports.exclusion_list import ExclusionList

LOCATION_DISTANCE_PRECISION = 2


class NearestCapabilityLocationFinder:
    """Location-to-location matcher constrained by water body type and capability."""

    def __init__(
        self,
        exclusion_list: ExclusionList,
        max_distance_km: float = DEFAULT_MAX_DISTANCE_KM,
        precision: int = LOCATION_DISTANCE_PRECISION,
    ) -> None:
        """Initialize with the exclusion list, the distance ceiling and the rounding precision."""
        self._exclusion_list = exclusion_list
        self._max_distance_km = max_distance_km
        self._precision = precision

    def find_nearest(
        self, location: RwsLocation, all_locations: Iterable[RwsLocation], capability: str
    ) -> MatchResult[RwsLocation] | None:
        """Find the nearest location with the capability, or None.

        Args:
            location: The location that is missing the measurement.
            all_locations: Current RWS catalog snapshot.
            capability: Measurement code to look for, e.g. "Hm0", "Tm02", "Th3".
        """
        return self._ranker_for(capability).nearest(location, all_locations)

    def find_nearest_candidates(
        self,
        location: RwsLocation,
        all_locations: Iterable[RwsLocation],
        capability: str,
        limit: int = DEFAULT_CANDIDATE_LIMIT,
    ) -> list[MatchResult[RwsLocation]]:
        """Find up to ``limit`` locations with the capability, nearest first."""
        return self._ranker_for(capability).nearest_n(location, all_locations, limit)

    def _ranker_for(self, capability: str) -> NearestNeighborRanker[RwsLocation]:
        chain = CandidateFilterChain(
            predicates=(
                not_self,
                NotExcluded(self._exclusion_list),
                same_water_body_type,
                HasCapability(capability),
            ),
            max_distance_km=self._max_distance_km,
        )
        return NearestNeighborRanker(chain, self._precision)
