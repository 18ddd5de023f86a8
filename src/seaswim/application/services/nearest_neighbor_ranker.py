"""Nearest-neighbour ranking of filtered candidates."""

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from seaswim.application.services.candidate_filters import CandidateFilterChain
from seaswim.domain.contracts.locatable import Locatable
from seaswim.domain.models.match_result import MatchResult

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATE_LIMIT = 5

C = TypeVar("C", bound=Locatable)


class NearestNeighborRanker(Generic[C]):
    """Sorts admitted candidates by distance to a source.

    Sorting uses the unrounded distance and is stable, so candidates at the
    same distance keep their catalog order and the first one seen wins.
    Reported distances are rounded to ``precision`` decimals.
    """

    def __init__(self, filter_chain: CandidateFilterChain, precision: int) -> None:
        """Initialize with a filter chain and the decimals to round reported distances to."""
        self._filter_chain = filter_chain
        self._precision = precision

    def rank(self, source: Locatable, candidates: Iterable[C]) -> list[MatchResult[C]]:
        """Rank every admitted candidate, nearest first."""
        admitted: list[tuple[float, C]] = []
        considered = 0
        for candidate in candidates:
            considered += 1
            distance = self._filter_chain.admit(source, candidate)
            if distance is not None:
                admitted.append((distance, candidate))

        admitted.sort(key=lambda item: item[0])
        logger.debug(f"Admitted {len(admitted)} of {considered} candidates for '{source.id}'")

        return [
            MatchResult(candidate=candidate, distance_km=round(distance, self._precision))
            for distance, candidate in admitted
        ]

    def nearest(self, source: Locatable, candidates: Iterable[C]) -> MatchResult[C] | None:
        """Return the single best match, or None when nothing survives filtering."""
        results = self.nearest_n(source, candidates, limit=1)
        return results[0] if results else None

    def nearest_n(
        self, source: Locatable, candidates: Iterable[C], limit: int = DEFAULT_CANDIDATE_LIMIT
    ) -> list[MatchResult[C]]:
        """Return at most ``limit`` matches, nearest first."""
        if limit < 1:
            return []
        return self.rank(source, candidates)[:limit]
