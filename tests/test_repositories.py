"""Tests for the file-backed repository adapters."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

import pytest

from seaswim.adapters.repositories import (
    CsvSwimmingSpotRepository,
    JsonFileRwsLocationRepository,
    JsonFileTideSampleSource,
    JsonFileWeatherStationRepository,
)
from seaswim.domain.models import RwsLocation, WaterBodyType, WeatherStation


class TestJsonFileRwsLocationRepository:
    """Tests for the RWS location catalog file."""

    def test_reads_catalog(self, tmp_path: Path) -> None:
        """Given a catalog file, when reading, then records become domain locations."""
        path = tmp_path / "rws-locations.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "id": "vlissingen",
                        "name": "Vlissingen",
                        "latitude": 51.44,
                        "longitude": 3.6,
                        "compartments": ["OW"],
                        "capabilities": ["WATHTE", "T"],
                        "water_body_type": "sea",
                        "extra": "ignored",
                    }
                ]
            ),
            encoding="utf-8",
        )

        repository = JsonFileRwsLocationRepository(path)

        assert repository.find_all() == [
            RwsLocation(
                id="vlissingen",
                name="Vlissingen",
                latitude=51.44,
                longitude=3.6,
                compartments=("OW",),
                capabilities=("WATHTE", "T"),
                water_body_type=WaterBodyType.SEA,
            )
        ]
        assert repository.find_by_id("vlissingen") is not None
        assert repository.find_by_id("missing") is None

    def test_missing_water_body_type_is_unknown(self, tmp_path: Path) -> None:
        """Given a record without water body type, when reading, then it is UNKNOWN."""
        path = tmp_path / "rws-locations.json"
        path.write_text(
            json.dumps([{"id": "a", "name": "A", "latitude": 52.0, "longitude": 4.0}]),
            encoding="utf-8",
        )

        location = JsonFileRwsLocationRepository(path).find_all()[0]

        assert location.water_body_type is WaterBodyType.UNKNOWN
        assert location.capabilities == ()

    def test_invalid_record_is_skipped(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Given one invalid record, when reading, then the valid ones are still returned."""
        path = tmp_path / "rws-locations.json"
        path.write_text(
            json.dumps(
                [
                    {"id": "bad", "name": "Bad", "latitude": "north", "longitude": 4.0},
                    {"id": "good", "name": "Good", "latitude": 52.0, "longitude": 4.0},
                ]
            ),
            encoding="utf-8",
        )

        with caplog.at_level(logging.WARNING):
            locations = JsonFileRwsLocationRepository(path).find_all()

        assert [loc.id for loc in locations] == ["good"]
        assert "Skipping invalid record #0" in caplog.text

    @pytest.mark.parametrize("content", ["not json", '{"id": "a"}'])
    def test_unreadable_catalog_is_empty(self, tmp_path: Path, content: str) -> None:
        """Given malformed JSON or a non-array document, when reading, then the catalog is empty."""
        path = tmp_path / "rws-locations.json"
        path.write_text(content, encoding="utf-8")

        assert JsonFileRwsLocationRepository(path).find_all() == []

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        """Given no catalog file, when reading, then the catalog is empty."""
        assert JsonFileRwsLocationRepository(tmp_path / "missing.json").find_all() == []

    def test_save_all_writes_catalog_back(self, tmp_path: Path) -> None:
        """Given saved locations, when reading them again, then they are unchanged."""
        path = tmp_path / "nested" / "rws-locations.json"
        repository = JsonFileRwsLocationRepository(path)
        location = RwsLocation(
            id="europlatform",
            name="Europlatform",
            latitude=52.0,
            longitude=3.27,
            capabilities=("Hm0", "Tm02", "Th3"),
            water_body_type=WaterBodyType.SEA,
        )

        repository.save_all([location])

        assert repository.find_all() == [location]
        assert json.loads(path.read_text(encoding="utf-8"))[0]["water_body_type"] == "sea"


class TestJsonFileWeatherStationRepository:
    """Tests for the weather station catalog file."""

    def test_reads_stations_keyed_by_code(self, tmp_path: Path) -> None:
        """Given stations keyed by code, when reading, then the code becomes the id."""
        path = tmp_path / "knmi-stations.json"
        path.write_text(
            json.dumps([{"code": "260", "name": "De Bilt", "latitude": 52.1, "longitude": 5.18}]),
            encoding="utf-8",
        )
        repository = JsonFileWeatherStationRepository(path)

        assert repository.find_by_id("260") == WeatherStation(
            id="260", name="De Bilt", latitude=52.1, longitude=5.18
        )
        assert repository.find_by_id("344") is None


class TestCsvSwimmingSpotRepository:
    """Tests for the swimming spot CSV file."""

    def test_reads_spots(self, tmp_path: Path) -> None:
        """Given a CSV file, when reading, then spots get slug ids."""
        path = tmp_path / "swimming-spots.csv"
        path.write_text(
            "name,latitude,longitude\nScheveningen Noord,52.11,4.27\nKijkduin,52.07,4.22\n",
            encoding="utf-8",
        )

        repository = CsvSwimmingSpotRepository(path)

        assert [spot.id for spot in repository.find_all()] == ["scheveningen-noord", "kijkduin"]
        assert repository.find_by_id("kijkduin") is not None
        assert repository.find_by_id("zandvoort") is None

    def test_malformed_rows_are_skipped(self, tmp_path: Path) -> None:
        """Given short, long and non-numeric rows, when reading, then only valid rows remain."""
        path = tmp_path / "swimming-spots.csv"
        path.write_text(
            "name,latitude,longitude\n"
            "Short,52.0\n"
            "Long,52.0,4.0,extra\n"
            "Bad,north,4.0\n"
            "Zandvoort,52.37,4.53\n",
            encoding="utf-8",
        )

        spots = CsvSwimmingSpotRepository(path).find_all()

        assert [spot.name for spot in spots] == ["Zandvoort"]

    def test_file_is_read_once(self, tmp_path: Path) -> None:
        """Given a cached repository, when the file changes, then the cached spots are returned."""
        path = tmp_path / "swimming-spots.csv"
        path.write_text("name,latitude,longitude\nKijkduin,52.07,4.22\n", encoding="utf-8")
        repository = CsvSwimmingSpotRepository(path)
        repository.find_all()

        path.write_text("name,latitude,longitude\n", encoding="utf-8")

        assert len(repository.find_all()) == 1

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        """Given no CSV file, when reading, then there are no spots."""
        assert CsvSwimmingSpotRepository(tmp_path / "missing.csv").find_all() == []


class TestJsonFileTideSampleSource:
    """Tests for the tide sample file."""

    def test_reads_samples(self, tmp_path: Path) -> None:
        """Given a sample file, when fetching, then the raw samples are returned."""
        path = tmp_path / "samples.json"
        samples = [{"timestamp": "2024-06-01T00:00:00+00:00", "height": 12.0}]
        path.write_text(json.dumps(samples), encoding="utf-8")
        now = datetime(2024, 6, 1, tzinfo=UTC)

        source = JsonFileTideSampleSource(path)

        assert source.fetch_samples("vlissingen", now, now) == samples
        assert source.get_last_error() is None

    def test_missing_file_sets_error(self, tmp_path: Path) -> None:
        """Given no sample file, when fetching, then None is returned with an error."""
        now = datetime(2024, 6, 1, tzinfo=UTC)
        source = JsonFileTideSampleSource(tmp_path / "missing.json")

        assert source.fetch_samples("vlissingen", now, now) is None
        assert "Could not read tide samples" in (source.get_last_error() or "")

    def test_non_array_sets_error(self, tmp_path: Path) -> None:
        """Given a JSON object instead of an array, when fetching, then None is returned with an error."""
        path = tmp_path / "samples.json"
        path.write_text('{"height": 1}', encoding="utf-8")
        now = datetime(2024, 6, 1, tzinfo=UTC)
        source = JsonFileTideSampleSource(path)

        assert source.fetch_samples("vlissingen", now, now) is None
        assert "does not contain a JSON array" in (source.get_last_error() or "")
