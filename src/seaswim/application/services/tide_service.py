"""Tide information for RWS locations."""

import logging
import math
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from seaswim.application.services.tidal_extrema_detector import TidalExtremaDetector
from seaswim.domain.contracts.raw_tide_sample import RawTideSample
from seaswim.domain.models.tide_info import TideInfo
from seaswim.domain.models.tide_point import TidePoint
from seaswim.domain.ports.tide_sample_source import TideSampleSource

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_HOURS = 12


def parse_tide_samples(samples: Iterable[RawTideSample]) -> list[TidePoint]:
    """Convert raw samples into tide points, skipping malformed ones.

    Timestamps are ISO 8601; naive timestamps are taken as UTC. Samples with an
    unparseable timestamp or a missing or non-finite height are dropped with a
    warning. The result is sorted by timestamp.
    """
    points: list[TidePoint] = []
    skipped = 0
    for sample in samples:
        try:
            timestamp = datetime.fromisoformat(str(sample["timestamp"]))
            height = sample["height"]
            if isinstance(height, bool):
                raise ValueError("boolean height")
            height_cm = float(height)
        except (KeyError, TypeError, ValueError) as e:
            skipped += 1
            logger.warning(f"Skipping malformed tide sample {sample!r}: {e}")
            continue
        if not math.isfinite(height_cm):
            skipped += 1
            logger.warning(f"Skipping tide sample with non-finite height {sample!r}")
            continue
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=UTC)
        points.append(TidePoint(timestamp=timestamp, height_cm=height_cm))

    if skipped:
        logger.info(f"Parsed {len(points)} tide samples, skipped {skipped}")
    points.sort(key=lambda point: point.timestamp)
    return points


class TideService:
    """Fetches predicted water heights around now and derives tide events."""

    def __init__(
        self,
        sample_source: TideSampleSource,
        detector: TidalExtremaDetector | None = None,
        window_hours: int = DEFAULT_WINDOW_HOURS,
    ) -> None:
        """Initialize with a sample source, a detector and the hours fetched on each side of now."""
        self._sample_source = sample_source
        self._detector = detector or TidalExtremaDetector()
        self._window = timedelta(hours=window_hours)
        self._last_error: str | None = None

    @property
    def last_error(self) -> str | None:
        """Why the last get_tide_info call returned None, if it did."""
        return self._last_error

    def get_tide_info(self, location_id: str, now: datetime | None = None) -> TideInfo | None:
        """Detect tide events for a location in a window around now.

        A naive now is taken as UTC. Returns None when the source fails or has no
        data; last_error then says why.
        """
        self._last_error = None
        now = now or datetime.now(UTC)
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)

        samples = self._sample_source.fetch_samples(location_id, now - self._window, now + self._window)
        if samples is None:
            self._last_error = self._sample_source.get_last_error() or "Tide sample source failed"
            logger.warning(f"No tide samples for '{location_id}': {self._last_error}")
            return None

        points = parse_tide_samples(samples)
        if not points:
            self._last_error = "No tidal data available for this location"
            return None

        return self._detector.calculate_tides(points, now)
