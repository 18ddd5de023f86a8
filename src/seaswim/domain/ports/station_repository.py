"""Weather station repository port."""

from typing import Protocol

from seaswim.domain.models.weather_station import WeatherStation


class WeatherStationRepository(Protocol):
    """Port for reading the catalog of one weather-station network."""

    def find_all(self) -> list[WeatherStation]:
        """Return the current catalog snapshot."""
        ...

    def find_by_id(self, station_id: str) -> WeatherStation | None:
        """Find a station by its code."""
        ...
