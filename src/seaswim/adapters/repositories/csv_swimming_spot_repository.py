"""CSV file backed swimming spot repository."""

import csv
import logging
from pathlib import Path

from seaswim.domain.models.swimming_spot import SwimmingSpot
from seaswim.domain.ports.swimming_spot_repository import SwimmingSpotRepository

logger = logging.getLogger(__name__)


class CsvSwimmingSpotRepository(SwimmingSpotRepository):
    """Adapter reading swimming spots from a CSV file with a name,latitude,longitude header.

    The file is read once and cached for the lifetime of the repository.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize with the CSV path."""
        self._path = Path(path)
        self._cache: list[SwimmingSpot] | None = None

    def find_all(self) -> list[SwimmingSpot]:
        if self._cache is None:
            self._cache = self._load()
        return list(self._cache)

    def find_by_id(self, spot_id: str) -> SwimmingSpot | None:
        for spot in self.find_all():
            if spot.id == spot_id:
                return spot
        return None

    def _load(self) -> list[SwimmingSpot]:
        if not self._path.exists():
            logger.warning(f"Swimming spot file not found: {self._path}")
            return []

        spots: list[SwimmingSpot] = []
        with open(self._path, newline="", encoding="utf-8") as f:
            for line_number, row in enumerate(csv.DictReader(f), start=2):
                # DictReader puts surplus fields under None and fills missing ones with None
                if None in row or any(value is None for value in row.values()):
                    logger.warning(f"Skipping malformed row {line_number} in {self._path}")
                    continue
                try:
                    spots.append(SwimmingSpot.from_csv_row(row))
                except (KeyError, ValueError) as e:
                    logger.warning(f"Skipping invalid row {line_number} in {self._path}: {e}")
        return spots
