"""12-factor configuration adapter using environment variables and TOML config."""

import logging
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Fallback for older Python

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_MATCHING_KEYS = (
    "max_match_distance_km",
    "weather_station_max_distance_km",
    "candidate_limit",
    "fuzzy_name_tolerance",
    "knmi_default_station_id",
    "buienradar_default_station_id",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Data files
    data_dir: str = Field(default="var/data", description="Directory holding the catalog files")
    rws_locations_file: str = Field(
        default="rws-locations.json", description="RWS location catalog, relative to data_dir"
    )
    knmi_stations_file: str = Field(
        default="knmi-stations.json", description="KNMI station catalog, relative to data_dir"
    )
    buienradar_stations_file: str = Field(
        default="buienradar-stations.json",
        description="Buienradar station catalog, relative to data_dir",
    )
    swimming_spots_file: str = Field(
        default="data/swimming-spots.csv", description="CSV file with the curated swimming spots"
    )
    exclusion_list_file: str = Field(
        default="data/blacklist.txt",
        description="Line-delimited list of RWS location ids to skip during matching",
    )

    # Matching
    max_match_distance_km: float = Field(
        default=20.0, description="Distance ceiling for location and Buienradar matches"
    )
    weather_station_max_distance_km: float | None = Field(
        default=None, description="Optional distance ceiling for KNMI station matches"
    )
    candidate_limit: int = Field(
        default=5, description="Number of fallback candidates returned by default"
    )
    fuzzy_name_tolerance: int = Field(
        default=3, description="Largest edit distance accepted when matching station names"
    )
    knmi_default_station_id: str = Field(
        default="260", description="KNMI station used when no name matches (De Bilt)"
    )
    buienradar_default_station_id: str = Field(
        default="6260", description="Buienradar station used when no name matches (De Bilt)"
    )

    # Tides
    tide_window_hours: int = Field(
        default=12, description="Hours before and after now to fetch water heights for"
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    # Optional TOML file with a [matching] section
    config_file: str | None = Field(
        default=None, description="Path to TOML configuration file overriding matching settings"
    )

    @field_validator("max_match_distance_km", "weather_station_max_distance_km")
    @classmethod
    def validate_distance(cls, v: float | None) -> float | None:
        """Validate distance ceilings are positive."""
        if v is not None and v <= 0:
            raise ValueError("distance ceilings must be positive")
        return v

    @field_validator("candidate_limit", "tide_window_hours")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts are at least one."""
        if v < 1:
            raise ValueError("candidate_limit and tide_window_hours must be at least 1")
        return v

    @field_validator("fuzzy_name_tolerance")
    @classmethod
    def validate_tolerance(cls, v: int) -> int:
        """Validate the fuzzy tolerance is not negative."""
        if v < 0:
            raise ValueError("fuzzy_name_tolerance must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def data_path(self, file_name: str) -> Path:
        """Resolve a catalog file name against data_dir."""
        return Path(self.data_dir) / file_name

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def apply_toml_overrides(self) -> None:
        """Apply the [matching] section of config_file, if one is configured.

        Values are validated like environment values.
        """
        if not self.config_file:
            return

        matching = self._load_toml_data().get("matching", {})
        if not isinstance(matching, dict):
            raise ValueError("TOML config 'matching' must be a table")

        for key in _MATCHING_KEYS:
            if key in matching:
                setattr(self, key, matching[key])
