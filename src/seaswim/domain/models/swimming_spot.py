"""Swimming spot domain model."""

import re
from dataclasses import dataclass
from typing import Mapping

from seaswim.domain.models.coordinate import Coordinate

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class SwimmingSpot:
    """A human-curated swimming spot."""

    id: str
    name: str
    latitude: float
    longitude: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)

    @staticmethod
    def slugify(name: str) -> str:
        """Create a URL-safe identifier from a spot name.

        Anything outside a-z and 0-9 (including accented letters) collapses
        into a single hyphen, e.g. "Scheveningen Noord" -> "scheveningen-noord".
        """
        slug = _NON_SLUG_CHARS.sub("-", name.lower())
        return slug.strip("-")

    @classmethod
    def from_csv_row(cls, row: Mapping[str, str]) -> "SwimmingSpot":
        """Create a swimming spot from a CSV row with name, latitude and longitude."""
        name = row["name"]
        return cls(
            id=cls.slugify(name),
            name=name,
            latitude=float(row["latitude"]),
            longitude=float(row["longitude"]),
        )
