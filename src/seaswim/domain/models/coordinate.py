"""Coordinate domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float
