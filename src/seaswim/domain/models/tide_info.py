"""Tide info domain model."""

from dataclasses import dataclass
from datetime import datetime

from seaswim.domain.models.tide_event import TideEvent
from seaswim.domain.models.tide_type import TideType


@dataclass(frozen=True)
class TideInfo:
    """Tide events of one detection run, queried relative to a reference time.

    Events are expected in chronological order. An event exactly at the
    reference time counts as "previous", never as "next".
    """

    events: tuple[TideEvent, ...]
    reference_time: datetime

    def previous(self) -> TideEvent | None:
        """Last event at or before the reference time."""
        previous = None
        for event in self.events:
            if event.time > self.reference_time:
                break
            previous = event
        return previous

    def next(self) -> TideEvent | None:
        """First event after the reference time."""
        for event in self.events:
            if event.time > self.reference_time:
                return event
        return None

    def next_high(self) -> TideEvent | None:
        """First high tide after the reference time."""
        return self._find_next(TideType.HIGH)

    def next_low(self) -> TideEvent | None:
        """First low tide after the reference time."""
        return self._find_next(TideType.LOW)

    def previous_high(self) -> TideEvent | None:
        """Last high tide at or before the reference time."""
        return self._find_previous(TideType.HIGH)

    def previous_low(self) -> TideEvent | None:
        """Last low tide at or before the reference time."""
        return self._find_previous(TideType.LOW)

    def _find_next(self, tide_type: TideType) -> TideEvent | None:
        for event in self.events:
            if event.time > self.reference_time and event.type is tide_type:
                return event
        return None

    def _find_previous(self, tide_type: TideType) -> TideEvent | None:
        previous = None
        for event in self.events:
            if event.time > self.reference_time:
                break
            if event.type is tide_type:
                previous = event
        return previous
