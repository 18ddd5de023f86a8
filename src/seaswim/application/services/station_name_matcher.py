"""Repository-backed name matcher for weather-station networks."""

from seaswim.application.services.fuzzy_name_matcher import DEFAULT_TOLERANCE, FuzzyNameMatcher
from seaswim.domain.models.weather_station import WeatherStation
from seaswim.domain.ports.station_repository import WeatherStationRepository

KNMI_DEFAULT_STATION_ID = "260"  # De Bilt
BUIENRADAR_DEFAULT_STATION_ID = "6260"  # De Bilt


class StationNameMatcher:
    """Matches an RWS location name against one network's station catalog."""

    def __init__(
        self,
        station_repository: WeatherStationRepository,
        default_station_id: str | None,
        tolerance: int = DEFAULT_TOLERANCE,
    ) -> None:
        """Initialize with a station catalog and the station used when no name matches."""
        self._station_repository = station_repository
        self._matcher = FuzzyNameMatcher(default_station_id, tolerance)

    def find_matching_station(self, location_name: str) -> WeatherStation | None:
        """Find the station matching the location name, falling back to the default station."""
        return self._matcher.find_matching_station(
            location_name, self._station_repository.find_all()
        )
