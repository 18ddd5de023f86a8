"""JSON file backed weather station repository."""

from pathlib import Path

from seaswim.adapters.repositories.json_catalog_file import JsonCatalogFile
from seaswim.adapters.repositories.records import WeatherStationRecord
from seaswim.domain.models.weather_station import WeatherStation
from seaswim.domain.ports.station_repository import WeatherStationRepository


class JsonFileWeatherStationRepository(WeatherStationRepository):
    """Adapter reading a KNMI or Buienradar station catalog from a JSON file."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the path of a catalog file keyed by station code."""
        self._file = JsonCatalogFile(path, WeatherStationRecord)

    def find_all(self) -> list[WeatherStation]:
        return [record.to_domain() for record in self._file.read()]

    def find_by_id(self, station_id: str) -> WeatherStation | None:
        for station in self.find_all():
            if station.id == station_id:
                return station
        return None
