"""Detects high and low tides in a water height series."""

from collections.abc import Sequence
from datetime import datetime
from enum import Enum

from seaswim.domain.models.tide_event import TideEvent
from seaswim.domain.models.tide_info import TideInfo
from seaswim.domain.models.tide_point import TidePoint
from seaswim.domain.models.tide_type import TideType

MIN_POINTS = 3


class _Direction(Enum):
    RISING = "rising"
    FALLING = "falling"


class TidalExtremaDetector:
    """Turns time-sorted water heights into alternating high/low tide events.

    An extremum is reported when the height direction reverses. Equal
    consecutive heights form a plateau that keeps the current direction, so a
    flat peak produces one event, reported at the first point of the plateau.
    The first and last samples are never reported. Heights are compared
    exactly.
    """

    def detect(self, points: Sequence[TidePoint]) -> list[TideEvent]:
        """Detect tide events in points already sorted by timestamp."""
        if len(points) < MIN_POINTS:
            return []

        events: list[TideEvent] = []
        last_direction: _Direction | None = None
        extreme = points[0]

        for previous, current in zip(points, points[1:]):
            if current.height_cm > previous.height_cm:
                if last_direction is _Direction.FALLING:
                    events.append(TideEvent(TideType.LOW, extreme.timestamp, extreme.height_cm))
                last_direction = _Direction.RISING
                extreme = current
            elif current.height_cm < previous.height_cm:
                if last_direction is _Direction.RISING:
                    events.append(TideEvent(TideType.HIGH, extreme.timestamp, extreme.height_cm))
                last_direction = _Direction.FALLING
                extreme = current
            # Equal heights: plateau, extreme stays at its first point

        return events

    def calculate_tides(self, points: Sequence[TidePoint], reference_time: datetime) -> TideInfo:
        """Detect tide events and wrap them for querying relative to reference_time."""
        return TideInfo(events=tuple(self.detect(points)), reference_time=reference_time)
