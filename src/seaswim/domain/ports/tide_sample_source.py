"""Tide sample source port."""

from datetime import datetime
from typing import Protocol

from seaswim.domain.contracts.raw_tide_sample import RawTideSample


class TideSampleSource(Protocol):
    """Port for fetching predicted water heights for a location."""

    def fetch_samples(
        self, location_id: str, start: datetime, end: datetime
    ) -> list[RawTideSample] | None:
        """Fetch time-sorted water height samples between start and end.

        Returns:
            The samples, an empty list when the source has no data for the
            window, or None when the source itself failed.
        """
        ...

    def get_last_error(self) -> str | None:
        """Describe why the last fetch returned None, if it did."""
        ...
