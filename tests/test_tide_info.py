"""Tests for querying tide events relative to a reference time."""

from datetime import UTC, datetime

from seaswim.domain.models import TideEvent, TideInfo, TideType

HIGH_MORNING = TideEvent(TideType.HIGH, datetime(2024, 6, 1, 3, 0, tzinfo=UTC), 140.0)
LOW_MORNING = TideEvent(TideType.LOW, datetime(2024, 6, 1, 9, 15, tzinfo=UTC), -90.0)
HIGH_AFTERNOON = TideEvent(TideType.HIGH, datetime(2024, 6, 1, 15, 30, tzinfo=UTC), 150.0)
LOW_EVENING = TideEvent(TideType.LOW, datetime(2024, 6, 1, 21, 45, tzinfo=UTC), -80.0)

EVENTS = (HIGH_MORNING, LOW_MORNING, HIGH_AFTERNOON, LOW_EVENING)


def _info(hour: int, minute: int = 0) -> TideInfo:
    return TideInfo(events=EVENTS, reference_time=datetime(2024, 6, 1, hour, minute, tzinfo=UTC))


def test_previous_and_next_around_reference() -> None:
    """Given a reference between two events, when querying, then previous and next surround it."""
    info = _info(12)

    assert info.previous() == LOW_MORNING
    assert info.next() == HIGH_AFTERNOON


def test_next_high_and_low() -> None:
    """Given a reference before a low tide, when asking for next by type, then each type is found."""
    info = _info(6)

    assert info.next_high() == HIGH_AFTERNOON
    assert info.next_low() == LOW_MORNING


def test_previous_high_and_low() -> None:
    """Given a reference in the evening, when asking for previous by type, then the latest of each is found."""
    info = _info(20)

    assert info.previous_high() == HIGH_AFTERNOON
    assert info.previous_low() == LOW_MORNING


def test_event_at_reference_time_is_previous() -> None:
    """Given a reference exactly at an event, when querying, then it is previous and not next."""
    info = _info(9, 15)

    assert info.previous() == LOW_MORNING
    assert info.previous_low() == LOW_MORNING
    assert info.next() == HIGH_AFTERNOON
    assert info.next_low() == LOW_EVENING


def test_before_all_events() -> None:
    """Given a reference before the first event, when querying, then there is no previous event."""
    info = _info(1)

    assert info.previous() is None
    assert info.previous_high() is None
    assert info.next() == HIGH_MORNING


def test_after_all_events() -> None:
    """Given a reference after the last event, when querying, then there is no next event."""
    info = _info(23)

    assert info.previous() == LOW_EVENING
    assert info.next() is None
    assert info.next_high() is None
    assert info.next_low() is None


def test_empty_events() -> None:
    """Given no events, when querying, then every query returns None."""
    info = TideInfo(events=(), reference_time=datetime(2024, 6, 1, tzinfo=UTC))

    assert info.previous() is None
    assert info.next() is None
    assert info.next_high() is None
    assert info.previous_low() is None
