"""File-backed repository adapters."""

from seaswim.adapters.repositories.csv_swimming_spot_repository import CsvSwimmingSpotRepository
from seaswim.adapters.repositories.json_file_rws_location_repository import (
    JsonFileRwsLocationRepository,
)
from seaswim.adapters.repositories.json_file_tide_sample_source import JsonFileTideSampleSource
from seaswim.adapters.repositories.json_file_weather_station_repository import (
    JsonFileWeatherStationRepository,
)

__all__ = [
    "CsvSwimmingSpotRepository",
    "JsonFileRwsLocationRepository",
    "JsonFileTideSampleSource",
    "JsonFileWeatherStationRepository",
]
