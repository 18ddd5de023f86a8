"""Tide event domain model."""

from dataclasses import dataclass
from datetime import datetime

from seaswim.domain.models.tide_type import TideType


@dataclass(frozen=True)
class TideEvent:
    """A detected high or low tide."""

    type: TideType
    time: datetime
    height_cm: float

    @property
    def height_meters(self) -> float:
        return self.height_cm / 100.0

    @property
    def is_high_tide(self) -> bool:
        return self.type is TideType.HIGH

    @property
    def is_low_tide(self) -> bool:
        return self.type is TideType.LOW
