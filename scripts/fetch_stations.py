#!/usr/bin/env python3
"""
Fetch radio stations from the radio-browser directory.

Creates a data/stations-<CC>.csv snapshot that `python -m src.main --stations`
and NearestStationFinder.load_csv can read offline.
"""

import argparse
import csv
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import DATA_DIR, LOG_LEVEL  # noqa: E402
from src.geo.nearest_station import CSV_FIELDS, Station  # noqa: E402
from src.services import ErrorPolicy, RadioDirectoryClient, ServiceError  # noqa: E402


def fetch_stations(country: str, state: str | None = None) -> list[Station]:
    """Fetch stations, failing loudly instead of writing an empty snapshot."""
    client = RadioDirectoryClient(error_policy=ErrorPolicy.RAISE)
    try:
        if state:
            return client.search_by_state(country, state)
        return client.search_by_country(country)
    finally:
        client.close()


def save_stations(stations: list[Station], output_file: Path) -> int:
    """Save stations with a usable position to CSV, returns rows written."""
    output_file.parent.mkdir(parents=True, exist_ok=True)

    seen = set()
    rows = []
    for station in stations:
        if station.coordinates is None:
            continue
        key = station.stationuuid or station.name
        if not station.name or key in seen:
            continue
        seen.add(key)
        rows.append(station.to_row())

    # Sort by name
    rows.sort(key=lambda x: x["name"].lower())

    with open(output_file, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(rows)

    return len(rows)


def main():
    parser = argparse.ArgumentParser(description="Snapshot radio stations to CSV")
    parser.add_argument("country", help="ISO 3166-1 alpha-2 country code")
    parser.add_argument("--state", default=None, help="Restrict to a state/region name")
    parser.add_argument("--output", type=Path, default=None, help="Output CSV path")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    country = args.country.upper()
    output_file = args.output or DATA_DIR / f"stations-{country}.csv"

    print("=" * 60)
    print("Radio Stations Fetcher")
    print("=" * 60)

    try:
        stations = fetch_stations(country, args.state)
    except ServiceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"\nFetched {len(stations)} stations for {country}")

    written = save_stations(stations, output_file)
    print(f"Saved {written} located stations to {output_file}")
    print("\nDone!")


if __name__ == "__main__":
    main()
