"""Tests for the great-circle distance metric."""

import math

import pytest

from seaswim.application.services.distance import EARTH_RADIUS_KM, haversine_km
from seaswim.domain.models import Coordinate


def test_identical_points_are_zero_apart() -> None:
    """Given the same coordinate twice, when measuring distance, then it is exactly zero."""
    point = Coordinate(51.98, 4.12)

    assert haversine_km(point, point) == 0.0


def test_distance_is_symmetric() -> None:
    """Given two coordinates, when measuring in both directions, then the distances are equal."""
    a = Coordinate(51.98, 4.12)
    b = Coordinate(51.96, 4.45)

    assert haversine_km(a, b) == pytest.approx(haversine_km(b, a))


def test_hoek_van_holland_to_rotterdam() -> None:
    """Given Hoek van Holland and Rotterdam, when measuring distance, then it is about 22.7 km."""
    distance = haversine_km(Coordinate(51.98, 4.12), Coordinate(51.96, 4.45))

    assert round(distance, 1) == 22.7


def test_one_degree_of_latitude() -> None:
    """Given points one degree of latitude apart, when measuring distance, then it is one radian-degree of the earth."""
    distance = haversine_km(Coordinate(52.0, 4.0), Coordinate(53.0, 4.0))

    assert distance == pytest.approx(EARTH_RADIUS_KM * math.pi / 180)


def test_antipodal_points() -> None:
    """Given antipodal points, when measuring distance, then it is half the earth's circumference."""
    distance = haversine_km(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))

    assert distance == pytest.approx(EARTH_RADIUS_KM * math.pi)
