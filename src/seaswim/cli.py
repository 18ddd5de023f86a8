"""Command-line interface for inspecting station matches and tides."""

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any

from seaswim.adapters.config import AppConfig
from seaswim.adapters.exclusion_list import FileExclusionList
from seaswim.adapters.repositories import (
    CsvSwimmingSpotRepository,
    JsonFileRwsLocationRepository,
    JsonFileTideSampleSource,
    JsonFileWeatherStationRepository,
)
from seaswim.application.services import (
    NearestCapabilityLocationFinder,
    NearestRwsLocationMatcher,
    RainRadarStationMatcher,
    StationNameMatcher,
    TideService,
    WeatherStationMatcher,
)
from seaswim.domain.models import (
    MatchResult,
    RwsLocation,
    TideEvent,
    WaterBodyType,
    WeatherStation,
)
from seaswim.domain.models.measurement_codes import (
    CATEGORIES,
    QUANTITIES,
    describe_compartment,
    describe_quantity,
)


@dataclass
class Services:
    """Repositories and matchers wired from configuration."""

    config: AppConfig
    spots: CsvSwimmingSpotRepository
    locations: JsonFileRwsLocationRepository
    exclusion_list: FileExclusionList
    knmi_stations: JsonFileWeatherStationRepository
    buienradar_stations: JsonFileWeatherStationRepository
    location_matcher: NearestRwsLocationMatcher
    weather_station_matcher: WeatherStationMatcher
    rain_radar_matcher: RainRadarStationMatcher
    capability_finder: NearestCapabilityLocationFinder
    knmi_name_matcher: StationNameMatcher
    buienradar_name_matcher: StationNameMatcher


def build_services(config: AppConfig) -> Services:
    """Wire repositories and matchers from configuration."""
    exclusion_list = FileExclusionList(config.exclusion_list_file)
    locations = JsonFileRwsLocationRepository(config.data_path(config.rws_locations_file))
    knmi_stations = JsonFileWeatherStationRepository(config.data_path(config.knmi_stations_file))
    buienradar_stations = JsonFileWeatherStationRepository(
        config.data_path(config.buienradar_stations_file)
    )

    return Services(
        config=config,
        spots=CsvSwimmingSpotRepository(config.swimming_spots_file),
        locations=locations,
        exclusion_list=exclusion_list,
        knmi_stations=knmi_stations,
        buienradar_stations=buienradar_stations,
        location_matcher=NearestRwsLocationMatcher(
            locations, exclusion_list, max_distance_km=config.max_match_distance_km
        ),
        weather_station_matcher=WeatherStationMatcher(
            knmi_stations, max_distance_km=config.weather_station_max_distance_km
        ),
        rain_radar_matcher=RainRadarStationMatcher(
            buienradar_stations, max_distance_km=config.max_match_distance_km
        ),
        capability_finder=NearestCapabilityLocationFinder(
            exclusion_list, max_distance_km=config.max_match_distance_km
        ),
        knmi_name_matcher=StationNameMatcher(
            knmi_stations, config.knmi_default_station_id, config.fuzzy_name_tolerance
        ),
        buienradar_name_matcher=StationNameMatcher(
            buienradar_stations, config.buienradar_default_station_id, config.fuzzy_name_tolerance
        ),
    )


def _station_dict(station: WeatherStation) -> dict[str, Any]:
    return {
        "code": station.id,
        "name": station.name,
        "latitude": station.latitude,
        "longitude": station.longitude,
    }


def _location_dict(location: RwsLocation) -> dict[str, Any]:
    return {
        "id": location.id,
        "name": location.name,
        "latitude": location.latitude,
        "longitude": location.longitude,
        "capabilities": list(location.capabilities),
        "water_body_type": location.water_body_type.value,
    }


def _match_dict(result: MatchResult[Any] | None, to_dict: Any) -> dict[str, Any] | None:
    if result is None:
        return None
    return {**to_dict(result.candidate), "distance_km": result.distance_km}


def _event_dict(event: TideEvent | None) -> dict[str, Any] | None:
    if event is None:
        return None
    return {
        "type": event.type.value,
        "time": event.time.isoformat(),
        "height_cm": event.height_cm,
    }


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _format_match(result: MatchResult[Any] | None) -> str:
    if result is None:
        return "none within range"
    return f"{result.candidate.name} ({result.candidate.id}, {result.distance_km} km)"


def _find_location(services: Services, query: str) -> RwsLocation | None:
    """Find an RWS location by id, falling back to a name or id substring search."""
    location = services.locations.find_by_id(query)
    if location is not None:
        return location

    query_lower = query.lower()
    for candidate in services.locations.find_all():
        if query_lower in candidate.name.lower() or query_lower in candidate.id.lower():
            return candidate
    return None


def handle_spots(services: Services, args: argparse.Namespace) -> int:
    """List the configured swimming spots."""
    spots = services.spots.find_all()
    if args.json:
        _print_json(
            [
                {"id": s.id, "name": s.name, "latitude": s.latitude, "longitude": s.longitude}
                for s in spots
            ]
        )
        return 0

    if not spots:
        print("No swimming spots configured.", file=sys.stderr)
        return 1
    print(f"\n{len(spots)} swimming spot(s):\n")
    for spot in spots:
        print(f"  {spot.name}")
        print(f"    ID: {spot.id}  ({spot.latitude}, {spot.longitude})")
    return 0


def handle_locations(services: Services, args: argparse.Namespace) -> int:
    """List RWS locations, filtered by search text, capability or the exclusion list."""
    locations = services.locations.find_all()
    if args.excluded:
        by_id = {location.id: location for location in locations}
        locations = [by_id[i] for i in services.exclusion_list.all() if i in by_id]
    if args.search:
        query = args.search.lower()
        locations = [
            location
            for location in locations
            if query in location.name.lower() or query in location.id.lower()
        ]
    if args.capability:
        locations = [location for location in locations if location.has_capability(args.capability)]

    if args.json:
        _print_json(
            [
                {
                    **_location_dict(location),
                    "excluded": services.exclusion_list.contains(location.id),
                }
                for location in locations
            ]
        )
        return 0

    if not locations:
        print("No locations found.", file=sys.stderr)
        return 1
    print(f"\n{len(locations)} location(s):\n")
    for location in locations:
        marker = "  [excluded]" if services.exclusion_list.contains(location.id) else ""
        print(f"  {location.name}{marker}")
        print(
            f"    ID: {location.id}  {location.water_body_type.value}  "
            f"({location.latitude}, {location.longitude})"
        )
        print(f"    Capabilities: {', '.join(location.capabilities) or 'none'}")
    return 0


def handle_classify(services: Services, args: argparse.Namespace) -> int:
    """Set the water body type of an RWS location and save the catalog."""
    water_body_type = WaterBodyType(args.water_body_type)
    classified: RwsLocation | None = None
    updated: list[RwsLocation] = []
    for location in services.locations.find_all():
        if location.id == args.location_id:
            classified = location.with_water_body_type(water_body_type)
            updated.append(classified)
        else:
            updated.append(location)

    if classified is None:
        print(f"Location '{args.location_id}' not found.", file=sys.stderr)
        return 1

    if not args.dry_run:
        services.locations.save_all(updated)

    if args.json:
        _print_json({"location": _location_dict(classified), "saved": not args.dry_run})
        return 0

    print(f"{classified.name} ({classified.id}) classified as {water_body_type.value}.")
    if args.dry_run:
        print("Dry run - no changes saved.")
    return 0


def handle_match(services: Services, args: argparse.Namespace) -> int:
    """Show the RWS location and weather stations matched to a swimming spot."""
    spot = services.spots.find_by_id(args.spot_id)
    if spot is None:
        print(f"Swimming spot '{args.spot_id}' not found.", file=sys.stderr)
        return 1

    location = services.location_matcher.find_nearest_location(spot)
    knmi = services.weather_station_matcher.find_nearest_station(spot)
    buienradar = services.rain_radar_matcher.find_nearest_station(spot)

    if args.json:
        _print_json(
            {
                "spot": {"id": spot.id, "name": spot.name},
                "rws_location": _match_dict(location, _location_dict),
                "knmi_station": _match_dict(knmi, _station_dict),
                "buienradar_station": _match_dict(buienradar, _station_dict),
            }
        )
        return 0

    print(f"\nSwimming spot: {spot.name} ({spot.latitude}, {spot.longitude})")
    print(f"  RWS location:       {_format_match(location)}")
    print(f"  KNMI station:       {_format_match(knmi)}")
    print(f"  Buienradar station: {_format_match(buienradar)}")
    return 0


def handle_nearest(services: Services, args: argparse.Namespace) -> int:
    """List nearby locations that measure a capability the given location lacks."""
    location = services.locations.find_by_id(args.location_id)
    if location is None:
        print(f"Location '{args.location_id}' not found.", file=sys.stderr)
        return 1

    limit = args.limit if args.limit is not None else services.config.candidate_limit
    candidates = services.capability_finder.find_nearest_candidates(
        location, services.locations.find_all(), args.capability, limit
    )

    if args.json:
        _print_json([_match_dict(c, _location_dict) for c in candidates])
        return 0

    description = describe_quantity(args.capability)
    label = f"{args.capability} ({description.english})" if description else args.capability
    if not candidates:
        print(
            f"No {location.water_body_type.value} location with {label} within "
            f"{services.config.max_match_distance_km} km of {location.name}.",
            file=sys.stderr,
        )
        return 1

    print(f"\nNearest locations with {label} for {location.name}:\n")
    for candidate in candidates:
        print(f"  {_format_match(candidate)}")
    return 0


def handle_station(services: Services, args: argparse.Namespace) -> int:
    """Show the weather stations matched by name to an RWS location."""
    location = _find_location(services, args.location)
    if location is None:
        print(f"Location '{args.location}' not found.", file=sys.stderr)
        return 1

    knmi = services.knmi_name_matcher.find_matching_station(location.name)
    buienradar = services.buienradar_name_matcher.find_matching_station(location.name)

    if args.json:
        _print_json(
            {
                "location": _location_dict(location),
                "knmi_station": _station_dict(knmi) if knmi else None,
                "buienradar_station": _station_dict(buienradar) if buienradar else None,
            }
        )
        return 0

    print(f"\nRWS location: {location.name} ({location.id})")
    print(f"  KNMI station:       {f'{knmi.name} ({knmi.id})' if knmi else 'none'}")
    print(
        f"  Buienradar station: {f'{buienradar.name} ({buienradar.id})' if buienradar else 'none'}"
    )
    return 0


def handle_tides(services: Services, args: argparse.Namespace) -> int:
    """Detect tide events in a file of water height samples."""
    reference_time = datetime.fromisoformat(args.at) if args.at else datetime.now(UTC)
    if reference_time.tzinfo is None:
        reference_time = reference_time.replace(tzinfo=UTC)

    tide_service = TideService(
        JsonFileTideSampleSource(args.samples_file),
        window_hours=services.config.tide_window_hours,
    )
    tide_info = tide_service.get_tide_info(args.samples_file, now=reference_time)
    if tide_info is None:
        print(f"No tide information: {tide_service.last_error}", file=sys.stderr)
        return 1

    if args.json:
        _print_json(
            {
                "reference_time": tide_info.reference_time.isoformat(),
                "events": [_event_dict(e) for e in tide_info.events],
                "previous": _event_dict(tide_info.previous()),
                "next": _event_dict(tide_info.next()),
                "next_high": _event_dict(tide_info.next_high()),
                "next_low": _event_dict(tide_info.next_low()),
            }
        )
        return 0

    print(f"\n{len(tide_info.events)} tide event(s):\n")
    for event in tide_info.events:
        print(f"  {event.time.isoformat()}  {event.type.label:<9}  {event.height_cm:g} cm")
    print()
    for title, event in (("Previous", tide_info.previous()), ("Next", tide_info.next())):
        described = f"{event.type.label} at {event.time.isoformat()}" if event else "none"
        print(f"{title + ':':<10}{described}")
    return 0


def handle_codes(services: Services, args: argparse.Namespace) -> int:  # noqa: ARG001
    """Describe measurement codes."""
    if args.code:
        quantity = describe_quantity(args.code)
        compartment = describe_compartment(args.code)
        if quantity is None and compartment is None:
            print(f"Unknown measurement code '{args.code}'.", file=sys.stderr)
            return 1
        if args.json:
            _print_json(
                {
                    "quantity": asdict(quantity) if quantity else None,
                    "compartment": asdict(compartment) if compartment else None,
                }
            )
            return 0
        if quantity:
            unit = f" [{quantity.unit}]" if quantity.unit else ""
            print(f"{args.code}: {quantity.english}{unit} - {quantity.description}")
        if compartment:
            print(f"{args.code}: {compartment.english} (compartment) - {compartment.description}")
        return 0

    if args.json:
        _print_json({code: asdict(q) for code, q in QUANTITIES.items()})
        return 0
    for category, title in CATEGORIES.items():
        codes = [code for code, q in QUANTITIES.items() if q.category == category]
        if not codes:
            continue
        print(f"\n{title}:")
        for code in codes:
            print(f"  {code:<10} {QUANTITIES[code].english}")
    return 0


_HANDLERS = {
    "spots": handle_spots,
    "locations": handle_locations,
    "classify": handle_classify,
    "match": handle_match,
    "nearest": handle_nearest,
    "station": handle_station,
    "tides": handle_tides,
    "codes": handle_codes,
}


def _positive_int(value: str) -> int:
    """Parse an integer argument of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Seaswim station matching and tide helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Locations measuring wave height
  seaswim locations --capability Hm0

  # Mark a location as measuring river water
  seaswim classify lobith river

  # Match a swimming spot to its RWS location and weather stations
  seaswim match scheveningen

  # Find wave height fallbacks for a location
  seaswim nearest vlissingen Hm0 --limit 3

  # Name-based weather station for an RWS location
  seaswim station "Hoek van Holland"

  # Tide events from a sample file
  seaswim tides samples.json --at 2024-01-01T12:00:00
        """,
    )
    parser.add_argument("--log-level", help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    spots_parser = subparsers.add_parser("spots", help="List swimming spots")
    spots_parser.add_argument("--json", action="store_true", help="Output as JSON")

    locations_parser = subparsers.add_parser("locations", help="List RWS locations")
    locations_parser.add_argument("--search", help="Case-insensitive text in the name or ID")
    locations_parser.add_argument(
        "--capability", help="Only locations measuring this code, e.g. Hm0"
    )
    locations_parser.add_argument(
        "--excluded", action="store_true", help="Only locations on the exclusion list"
    )
    locations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    classify_parser = subparsers.add_parser(
        "classify", help="Set the water body type of an RWS location"
    )
    classify_parser.add_argument("location_id", help="RWS location ID")
    classify_parser.add_argument(
        "water_body_type", choices=[t.value for t in WaterBodyType], help="Water body type"
    )
    classify_parser.add_argument("--dry-run", action="store_true", help="Do not save changes")
    classify_parser.add_argument("--json", action="store_true", help="Output as JSON")

    match_parser = subparsers.add_parser(
        "match", help="Match a swimming spot to an RWS location and weather stations"
    )
    match_parser.add_argument("spot_id", help="Swimming spot ID (slug)")
    match_parser.add_argument("--json", action="store_true", help="Output as JSON")

    nearest_parser = subparsers.add_parser(
        "nearest", help="Find nearby locations that measure a capability"
    )
    nearest_parser.add_argument("location_id", help="RWS location ID")
    nearest_parser.add_argument("capability", help="Measurement code, e.g. Hm0")
    nearest_parser.add_argument(
        "--limit", type=_positive_int, help="Maximum number of candidates (at least 1)"
    )
    nearest_parser.add_argument("--json", action="store_true", help="Output as JSON")

    station_parser = subparsers.add_parser(
        "station", help="Match an RWS location to weather stations by name"
    )
    station_parser.add_argument("location", help="RWS location ID or name")
    station_parser.add_argument("--json", action="store_true", help="Output as JSON")

    tides_parser = subparsers.add_parser("tides", help="Detect tides in a sample file")
    tides_parser.add_argument("samples_file", help="JSON file with timestamp/height samples")
    tides_parser.add_argument("--at", help="Reference time (ISO 8601), defaults to now")
    tides_parser.add_argument("--json", action="store_true", help="Output as JSON")

    codes_parser = subparsers.add_parser("codes", help="Describe measurement codes")
    codes_parser.add_argument("code", nargs="?", help="Code to describe, e.g. WATHTE")
    codes_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig()
        config.apply_toml_overrides()
        if args.log_level:
            config.log_level = args.log_level
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        return _HANDLERS[args.command](build_services(config), args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Entry point for the seaswim console script."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
