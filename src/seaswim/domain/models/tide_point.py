"""Tide point domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TidePoint:
    """A single water height sample."""

    timestamp: datetime
    height_cm: float
