"""Protocol for anything that can take part in geospatial matching."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from seaswim.domain.models.coordinate import Coordinate


class Locatable(Protocol):
    """A catalog entry or query point with an identifier and a position."""

    @property
    def id(self) -> str:
        """Identifier, unique within its catalog."""
        ...

    @property
    def name(self) -> str:
        """Display name."""
        ...

    @property
    def coordinate(self) -> "Coordinate":
        """WGS84 position."""
        ...
