"""JSON file backed RWS location repository."""

from pathlib import Path

from seaswim.adapters.repositories.json_catalog_file import JsonCatalogFile
from seaswim.adapters.repositories.records import RwsLocationRecord
from seaswim.domain.models.rws_location import RwsLocation
from seaswim.domain.ports.rws_location_repository import RwsLocationRepository


class JsonFileRwsLocationRepository(RwsLocationRepository):
    """Adapter reading the RWS location catalog from a JSON file."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the catalog path. The file is created on the first save."""
        self._file = JsonCatalogFile(path, RwsLocationRecord)

    def find_all(self) -> list[RwsLocation]:
        """Read the whole catalog; every call returns a fresh snapshot."""
        return [record.to_domain() for record in self._file.read()]

    def find_by_id(self, location_id: str) -> RwsLocation | None:
        for location in self.find_all():
            if location.id == location_id:
                return location
        return None

    def save_all(self, locations: list[RwsLocation]) -> None:
        """Replace the stored catalog."""
        self._file.write([RwsLocationRecord.from_domain(location) for location in locations])
