"""Water body type domain model."""

from enum import Enum


class WaterBodyType(str, Enum):
    """Physical classification of the water a location measures."""

    SEA = "sea"
    RIVER = "river"
    LAKE = "lake"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "WaterBodyType":
        """Parse a stored value, falling back to UNKNOWN for anything unrecognised."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.lower())
        except ValueError:
            return cls.UNKNOWN
