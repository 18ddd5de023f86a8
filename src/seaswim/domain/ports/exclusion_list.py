"""Exclusion list port."""

from typing import Protocol


class ExclusionList(Protocol):
    """Port for identifiers that must be skipped during matching."""

    def contains(self, location_id: str) -> bool:
        """Check whether the identifier is excluded (exact, case-sensitive)."""
        ...
