"""Shape of an unparsed tide sample as delivered by a sample source."""

from typing import TypedDict


class RawTideSample(TypedDict):
    """A water height sample before timestamp parsing and validation."""

    timestamp: str
    height: float
