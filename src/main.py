"""
Nearby Radio - Main entry point.

Usage:
    python -m src.main 52.52 13.405
    python -m src.main 52.52 13.405 --json
    python -m src.main 48.85 2.35 --stations data/stations-FR.csv
    python -m src.main --help
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from src.config import LOG_LEVEL
from src.geo import NearestStationFinder
from src.geo.station_resolver import ResolvedStation, StationResolver
from src.services import Location, ServiceError, WeatherClient
from src.weather import CurrentConditions, daily_forecast, units


def format_location(location: Location) -> str:
    """One-line description of a location, e.g. "Berlin (Berlin, DE)"."""
    details = ", ".join(p for p in (location.state, location.country_code.upper()) if p)
    return f"{location.name} ({details})" if details else location.name


def format_station(station: dict | None) -> str:
    """Text for the "station" entry of a report."""
    if station is None:
        return "Nearest station: none found"
    return (
        f"Nearest station: {station['name']} - {station['distance_km']} km "
        f"[{station['scope']}]\n  Stream: {station['stream_url']}"
    )


def format_weather(payload: dict) -> str:
    """
    Render current conditions and the daily forecast as text.

    Example:
        Now: ⛅ Partly cloudy, 18.2°C, 60% humidity, wind 12.0 km/h NW
    """
    current = CurrentConditions.from_payload(payload)
    current_units = units(payload)
    daily_units = units(payload, "daily")
    temp_unit = current_units.get("temperature_2m", "°C")
    humidity_unit = current_units.get("relative_humidity_2m", "%")
    wind_unit = current_units.get("wind_speed_10m", "km/h")
    day_unit = daily_units.get("temperature_2m_max", "°C")

    lines = [
        f"Now: {current.icon} {current.description}, {current.temperature}{temp_unit}, "
        f"{current.humidity}{humidity_unit} humidity, "
        f"wind {current.wind_speed} {wind_unit} {current.wind_cardinal}".rstrip()
    ]
    for day in daily_forecast(payload):
        lines.append(
            f"  {day.date}  {day.icon} {day.description}  "
            f"{day.temperature_min}{day_unit} / {day.temperature_max}{day_unit}"
        )
    return "\n".join(lines)


def resolve_from_snapshot(
    finder: NearestStationFinder, location: Location, lat: float, lon: float
) -> ResolvedStation | None:
    """Nearest station from an offline CSV snapshot instead of the directory API."""
    result = finder.find_nearest(lat, lon)
    if result is None:
        return None
    return ResolvedStation(location, result.station, result.distance_km, "country")


def build_report(
    lat: float,
    lon: float,
    resolver: StationResolver,
    weather_client: WeatherClient | None,
    finder: NearestStationFinder | None = None,
) -> tuple[dict, ServiceError | None]:
    """
    Collect location, nearest station and weather for a point.

    Weather failures do not abort the report; the error is returned
    alongside so the caller can decide the exit status.

    Returns:
        Tuple of (report dict, weather error or None)
    """
    location = resolver.locate(lat, lon)
    if finder is not None:
        resolved = resolve_from_snapshot(finder, location, lat, lon)
    else:
        resolved = resolver.resolve(lat, lon, location=location)

    weather = None
    weather_error = None
    if weather_client is not None:
        try:
            weather = weather_client.get_forecast(lat, lon)
        except ServiceError as e:
            weather_error = e

    report = {
        "latitude": lat,
        "longitude": lon,
        "location": asdict(location),
        "station": None,
        "weather": weather,
    }
    if resolved is not None:
        report["station"] = {
            "name": resolved.station.name,
            "stationuuid": resolved.station.stationuuid,
            "stream_url": resolved.station.stream_url,
            "homepage": resolved.station.homepage,
            "distance_km": resolved.distance_km,
            "scope": resolved.scope,
        }
    return report, weather_error


def print_report(report: dict) -> None:
    print(f"Location: {format_location(Location(**report['location']))}")
    print(format_station(report["station"]))
    if report["weather"]:
        print(format_weather(report["weather"]))


def main():
    parser = argparse.ArgumentParser(
        description="Nearby Radio - Find the closest radio station and the local weather"
    )
    parser.add_argument("lat", type=float, help="Latitude in degrees")
    parser.add_argument("lon", type=float, help="Longitude in degrees")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON document instead of text",
    )
    parser.add_argument(
        "--no-weather",
        action="store_true",
        help="Skip the weather forecast",
    )
    parser.add_argument(
        "--stations",
        type=Path,
        default=None,
        help="Use a station CSV snapshot instead of the directory API",
    )

    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if not (-90 <= args.lat <= 90 and -180 <= args.lon <= 180):
        print(f"Error: coordinates out of range: {args.lat}, {args.lon}", file=sys.stderr)
        sys.exit(2)

    finder = None
    if args.stations:
        if not args.stations.exists():
            print(f"Error: Stations file not found: {args.stations}", file=sys.stderr)
            sys.exit(1)
        finder = NearestStationFinder()
        finder.load_csv(args.stations)

    resolver = StationResolver()
    weather_client = None if args.no_weather else WeatherClient()

    report, weather_error = build_report(args.lat, args.lon, resolver, weather_client, finder)

    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        print_report(report)

    if weather_error is not None:
        print(f"Error: weather unavailable: {weather_error}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
