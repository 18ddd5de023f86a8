"""Tests for matching swimming spots to RWS locations."""

import logging

import pytest

from seaswim.application.services import NearestRwsLocationMatcher
from seaswim.domain.models import RwsLocation, SwimmingSpot


class InMemoryLocationRepository:
    """In-memory RWS location repository for testing."""

    def __init__(self, locations: list[RwsLocation]) -> None:
        self.locations = locations

    def find_all(self) -> list[RwsLocation]:
        return list(self.locations)

    def find_by_id(self, location_id: str) -> RwsLocation | None:
        return next((loc for loc in self.locations if loc.id == location_id), None)


class SetExclusionList:
    """In-memory exclusion list for testing."""

    def __init__(self, *location_ids: str) -> None:
        self.location_ids = set(location_ids)

    def contains(self, location_id: str) -> bool:
        return location_id in self.location_ids


SPOT = SwimmingSpot(id="scheveningen", name="Scheveningen", latitude=52.11, longitude=4.27)
SCHEVENINGEN = RwsLocation(id="scheveningen", name="Scheveningen", latitude=52.10, longitude=4.26)
KIJKDUIN = RwsLocation(id="kijkduin", name="Kijkduin", latitude=52.07, longitude=4.22)
IJMUIDEN = RwsLocation(id="ijmuiden", name="IJmuiden", latitude=52.46, longitude=4.55)


def test_finds_nearest_location() -> None:
    """Given several locations, when matching a spot, then the nearest one is returned with a rounded distance."""
    matcher = NearestRwsLocationMatcher(
        InMemoryLocationRepository([KIJKDUIN, SCHEVENINGEN]), SetExclusionList()
    )

    result = matcher.find_nearest_location(SPOT)

    assert result is not None
    assert result.candidate == SCHEVENINGEN
    assert result.distance_km == 1.3


def test_excluded_location_is_skipped() -> None:
    """Given the nearest location is excluded, when matching, then the next nearest is returned."""
    matcher = NearestRwsLocationMatcher(
        InMemoryLocationRepository([SCHEVENINGEN, KIJKDUIN]), SetExclusionList("scheveningen")
    )

    result = matcher.find_nearest_location(SPOT)

    assert result is not None
    assert result.candidate == KIJKDUIN


def test_location_with_spot_id_is_not_treated_as_self() -> None:
    """Given a location sharing the spot's id, when matching, then it is still a valid candidate."""
    matcher = NearestRwsLocationMatcher(InMemoryLocationRepository([SCHEVENINGEN]), SetExclusionList())

    result = matcher.find_nearest_location(SPOT)

    assert result is not None
    assert result.candidate.id == SPOT.id


def test_too_far_location_returns_none(caplog: pytest.LogCaptureFixture) -> None:
    """Given only a location beyond 20 km, when matching, then None is returned and logged."""
    matcher = NearestRwsLocationMatcher(InMemoryLocationRepository([IJMUIDEN]), SetExclusionList())

    with caplog.at_level(logging.INFO):
        result = matcher.find_nearest_location(SPOT)

    assert result is None
    assert "No RWS location within range" in caplog.text


def test_all_excluded_returns_empty_list() -> None:
    """Given every location excluded, when asking for a list, then it is empty."""
    matcher = NearestRwsLocationMatcher(
        InMemoryLocationRepository([SCHEVENINGEN, KIJKDUIN]),
        SetExclusionList("scheveningen", "kijkduin"),
    )

    assert matcher.find_nearest_locations(SPOT) == []


def test_find_nearest_locations_respects_limit_and_order() -> None:
    """Given several locations, when asking for a limited list, then the nearest ones come first."""
    matcher = NearestRwsLocationMatcher(
        InMemoryLocationRepository([IJMUIDEN, KIJKDUIN, SCHEVENINGEN]),
        SetExclusionList(),
        max_distance_km=100.0,
    )

    results = matcher.find_nearest_locations(SPOT, limit=2)

    assert [r.candidate.id for r in results] == ["scheveningen", "kijkduin"]
