"""JSON file backed tide sample source."""

import json
import logging
from datetime import datetime
from pathlib import Path

from seaswim.domain.contracts.raw_tide_sample import RawTideSample
from seaswim.domain.ports.tide_sample_source import TideSampleSource

logger = logging.getLogger(__name__)


class JsonFileTideSampleSource(TideSampleSource):
    """Reads pre-fetched water height predictions from a JSON file.

    The file holds an array of ``{"timestamp": ..., "height": ...}`` objects.
    The window arguments are not applied; the file is taken as the window.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize with a JSON file of timestamp and height samples."""
        self._path = Path(path)
        self._last_error: str | None = None

    def fetch_samples(
        self, location_id: str, start: datetime, end: datetime  # noqa: ARG002
    ) -> list[RawTideSample] | None:
        self._last_error = None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            self._last_error = f"Could not read tide samples from {self._path}: {e}"
            return None

        if not isinstance(data, list):
            self._last_error = f"Tide sample file {self._path} does not contain a JSON array"
            return None
        return data

    def get_last_error(self) -> str | None:
        return self._last_error
