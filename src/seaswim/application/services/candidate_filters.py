"""Composable candidate filters for nearest-neighbour matching.

Each concrete matcher builds a CandidateFilterChain from the predicates it
needs. Predicates run in the order given and short-circuit; the distance
ceiling runs last because it is the only check that needs the distance.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from seaswim.application.services.distance import haversine_km
from seaswim.domain.contracts.candidate_predicate import CandidatePredicate
from seaswim.domain.contracts.locatable import Locatable
from seaswim.domain.models.rws_location import RwsLocation
from seaswim.domain.models.water_body_type import WaterBodyType
from seaswim.domain.ports.exclusion_list import ExclusionList

DEFAULT_MAX_DISTANCE_KM = 20.0


def not_self(source: Locatable, candidate: Locatable) -> bool:
    """Reject the source itself (same identifier)."""
    return candidate.id != source.id


class NotExcluded:
    """Reject candidates whose identifier is on the exclusion list."""

    def __init__(self, exclusion_list: ExclusionList) -> None:
        """Initialize with the exclusion list to consult."""
        self._exclusion_list = exclusion_list

    def __call__(self, source: Locatable, candidate: Locatable) -> bool:  # noqa: ARG002
        return not self._exclusion_list.contains(candidate.id)


def same_water_body_type(source: RwsLocation, candidate: RwsLocation) -> bool:
    """Admit only candidates on the same, known kind of water as the source.

    A source of unknown type never matches anything.
    """
    if source.water_body_type is WaterBodyType.UNKNOWN:
        return False
    return candidate.water_body_type is source.water_body_type


class HasCapability:
    """Admit only candidates that report the given measurement code."""

    def __init__(self, capability: str) -> None:
        """Initialize with a quantity code."""
        self.capability = capability

    def __call__(self, source: Locatable, candidate: RwsLocation) -> bool:  # noqa: ARG002
        return candidate.has_capability(self.capability)


@dataclass(frozen=True)
class CandidateFilterChain:
    """Ordered predicates plus an optional distance ceiling."""

    predicates: Sequence[CandidatePredicate] = field(default_factory=tuple)
    max_distance_km: float | None = None

    def admit(self, source: Locatable, candidate: Locatable) -> float | None:
        """Return the distance in km if the candidate passes every filter, else None."""
        for predicate in self.predicates:
            if not predicate(source, candidate):
                return None

        distance = haversine_km(source.coordinate, candidate.coordinate)
        if self.max_distance_km is not None and distance > self.max_distance_km:
            return None
        return distance
