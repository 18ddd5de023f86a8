"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from seaswim.adapters.config import AppConfig


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run every test away from any local .env file."""
    monkeypatch.chdir(tmp_path)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.max_match_distance_km == 20.0
    assert config.weather_station_max_distance_km is None
    assert config.candidate_limit == 5
    assert config.fuzzy_name_tolerance == 3
    assert config.knmi_default_station_id == "260"
    assert config.buienradar_default_station_id == "6260"
    assert config.tide_window_hours == 12
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("MAX_MATCH_DISTANCE_KM", "15.5")
    monkeypatch.setenv("CANDIDATE_LIMIT", "3")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DATA_DIR", "/srv/seaswim")

    config = AppConfig()

    assert config.max_match_distance_km == 15.5
    assert config.candidate_limit == 3
    assert config.log_level == "DEBUG"
    assert config.data_path(config.rws_locations_file) == Path("/srv/seaswim/rws-locations.json")


def test_config_loads_from_env_file(tmp_path: Path) -> None:
    """Given a .env file in the working directory, when loading config, then it is used."""
    (tmp_path / ".env").write_text("FUZZY_NAME_TOLERANCE=2\n", encoding="utf-8")

    assert AppConfig().fuzzy_name_tolerance == 2


@pytest.mark.parametrize(
    ("variable", "value", "message"),
    [
        ("MAX_MATCH_DISTANCE_KM", "0", "distance ceilings must be positive"),
        ("WEATHER_STATION_MAX_DISTANCE_KM", "-1", "distance ceilings must be positive"),
        ("CANDIDATE_LIMIT", "0", "must be at least 1"),
        ("TIDE_WINDOW_HOURS", "0", "must be at least 1"),
        ("FUZZY_NAME_TOLERANCE", "-1", "must not be negative"),
        ("LOG_LEVEL", "chatty", "log_level must be a logging level name"),
    ],
)
def test_config_validates_values(
    monkeypatch: pytest.MonkeyPatch, variable: str, value: str, message: str
) -> None:
    """Given an invalid value, when loading config, then validation error is raised."""
    monkeypatch.setenv(variable, value)

    with pytest.raises(ValueError, match=message):
        AppConfig()


def test_toml_overrides_matching_section(tmp_path: Path) -> None:
    """Given a TOML file with a [matching] section, when applying overrides, then they replace defaults."""
    config_path = tmp_path / "seaswim.toml"
    config_path.write_text(
        """
[matching]
max_match_distance_km = 25.0
weather_station_max_distance_km = 50.0
candidate_limit = 3
knmi_default_station_id = "344"
unrelated = "ignored"
""",
        encoding="utf-8",
    )
    config = AppConfig(config_file=str(config_path))

    config.apply_toml_overrides()

    assert config.max_match_distance_km == 25.0
    assert config.weather_station_max_distance_km == 50.0
    assert config.candidate_limit == 3
    assert config.knmi_default_station_id == "344"
    assert config.fuzzy_name_tolerance == 3


def test_toml_overrides_are_validated(tmp_path: Path) -> None:
    """Given an invalid TOML value, when applying overrides, then validation error is raised."""
    config_path = tmp_path / "seaswim.toml"
    config_path.write_text("[matching]\ncandidate_limit = 0\n", encoding="utf-8")
    config = AppConfig(config_file=str(config_path))

    with pytest.raises(ValueError, match="must be at least 1"):
        config.apply_toml_overrides()


def test_toml_matching_must_be_a_table(tmp_path: Path) -> None:
    """Given a non-table matching key, when applying overrides, then ValueError is raised."""
    config_path = tmp_path / "seaswim.toml"
    config_path.write_text('matching = "nearby"\n', encoding="utf-8")
    config = AppConfig(config_file=str(config_path))

    with pytest.raises(ValueError, match="must be a table"):
        config.apply_toml_overrides()


def test_missing_toml_file_raises(tmp_path: Path) -> None:
    """Given a config file path that does not exist, when applying overrides, then FileNotFoundError is raised."""
    config = AppConfig(config_file=str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.apply_toml_overrides()


def test_no_toml_file_is_a_no_op() -> None:
    """Given no config file, when applying overrides, then nothing changes."""
    config = AppConfig()

    config.apply_toml_overrides()

    assert config.max_match_distance_km == 20.0
