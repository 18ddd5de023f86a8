"""Protocol for candidate filter predicates."""

from typing import Any, Protocol


class CandidatePredicate(Protocol):
    """A cheap, distance-independent test deciding whether a candidate may match a source."""

    def __call__(self, source: Any, candidate: Any) -> bool:
        """Return True when the candidate is admissible for the source.

        Args:
            source: The point of interest being matched.
            candidate: A catalog entry considered for the match.
        """
        ...
