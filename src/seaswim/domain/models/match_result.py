"""Match result domain model."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class MatchResult(Generic[T]):
    """A matched station or location with its distance to the query point.

    The distance is rounded to the precision of the matcher that produced it.
    """

    candidate: T
    distance_km: float
