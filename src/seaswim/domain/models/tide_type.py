"""Tide type domain model."""

from enum import Enum


class TideType(str, Enum):
    """Kind of tidal extremum."""

    HIGH = "high"
    LOW = "low"

    @property
    def label(self) -> str:
        return "High tide" if self is TideType.HIGH else "Low tide"
