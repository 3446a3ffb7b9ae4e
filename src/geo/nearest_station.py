"""Find the nearest radio station to a point with a linear Haversine scan."""

import csv
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .distance import GeoPoint, distance_km

# Columns written by scripts/fetch_stations.py
CSV_FIELDS = [
    "stationuuid",
    "name",
    "url",
    "url_resolved",
    "homepage",
    "favicon",
    "tags",
    "country",
    "countrycode",
    "state",
    "language",
    "codec",
    "bitrate",
    "clickcount",
    "geo_lat",
    "geo_long",
]


def parse_coordinate(value: Any) -> float | None:
    """
    Parse a raw coordinate value from the directory.

    Returns None for missing, boolean, non-numeric or non-finite values.
    Numeric strings (as found in CSV snapshots) are accepted.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _parse_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


@dataclass
class Station:
    """Radio station record from the radio-browser directory."""

    stationuuid: str = ""
    name: str = ""
    url: str = ""
    url_resolved: str = ""
    homepage: str = ""
    favicon: str = ""
    tags: str = ""
    country: str = ""
    countrycode: str = ""
    state: str = ""
    language: str = ""
    codec: str = ""
    bitrate: int = 0
    clickcount: int = 0
    geo_lat: float | None = None
    geo_long: float | None = None
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Station":
        """Build a station from a JSON object or CSV row, keeping the record as-is."""
        text_fields = {
            f.name: str(record.get(f.name) or "").strip()
            for f in fields(cls)
            if f.type is str
        }
        return cls(
            **text_fields,
            bitrate=_parse_int(record.get("bitrate")),
            clickcount=_parse_int(record.get("clickcount")),
            geo_lat=parse_coordinate(record.get("geo_lat")),
            geo_long=parse_coordinate(record.get("geo_long")),
            raw=dict(record),
        )

    @property
    def coordinates(self) -> GeoPoint | None:
        """
        Usable location of the station, or None.

        A coordinate equal to 0.0 counts as missing, as do out-of-range values.
        """
        lat, lon = self.geo_lat, self.geo_long
        if not lat or not lon:
            return None
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            return None
        return GeoPoint(lat, lon)

    @property
    def stream_url(self) -> str:
        """Resolved stream URL when the directory has one."""
        return self.url_resolved or self.url

    def to_row(self) -> dict[str, Any]:
        """Flatten to a CSV row using CSV_FIELDS."""
        row = {name: getattr(self, name) for name in CSV_FIELDS}
        row["geo_lat"] = "" if self.geo_lat is None else self.geo_lat
        row["geo_long"] = "" if self.geo_long is None else self.geo_long
        return row


@dataclass
class NearestResult:
    """Result of nearest station search."""

    station: Station
    distance_km: float


def find_nearest(stations: Iterable[Station] | None, reference: GeoPoint) -> Station | None:
    """
    Return the station closest to reference, or None.

    Stations without usable coordinates are skipped. On equal distances
    the first station in input order wins.
    """
    if not stations:
        return None

    nearest = None
    min_distance = math.inf

    for station in stations:
        location = station.coordinates
        if location is None:
            continue
        distance = distance_km(reference, location)
        if distance < min_distance:
            min_distance = distance
            nearest = station

    return nearest


class NearestStationFinder:
    """
    Find nearest radio stations from an in-memory station list.

    Stations come either from the directory API or from a CSV snapshot.
    """

    def __init__(self, stations: Iterable[Station] | None = None):
        """
        Initialize finder with station data.

        Args:
            stations: Stations to search
        """
        self.stations: list[Station] = []

        if stations:
            self.load_stations(stations)

    def load_stations(self, stations: Iterable[Station]) -> None:
        """Replace the station list."""
        self.stations = list(stations)

    def load_csv(self, filepath: str | Path) -> None:
        """
        Load stations from a CSV snapshot.

        Expected columns: see CSV_FIELDS. Rows without a name are skipped.
        """
        filepath = Path(filepath)
        stations = []

        with open(filepath, encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            for row in reader:
                station = Station.from_dict(row)
                if not station.name:
                    continue
                stations.append(station)

        self.load_stations(stations)

    @property
    def located_stations(self) -> list[Station]:
        """Stations that have usable coordinates."""
        return [s for s in self.stations if s.coordinates is not None]

    def find_nearest(self, lat: float, lon: float) -> NearestResult | None:
        """
        Find the nearest station to a given point.

        Args:
            lat: Latitude of the query point (degrees)
            lon: Longitude of the query point (degrees)

        Returns:
            NearestResult, or None if no station has coordinates
        """
        reference = GeoPoint(lat, lon)
        station = find_nearest(self.stations, reference)
        if station is None:
            return None

        distance = distance_km(reference, station.coordinates)
        return NearestResult(station=station, distance_km=round(distance, 1))

    def find_within(self, lat: float, lon: float, radius_km: float) -> list[NearestResult]:
        """
        Find all stations within radius_km of a point, closest first.

        Args:
            lat: Latitude of the query point (degrees)
            lon: Longitude of the query point (degrees)
            radius_km: Search radius in kilometers

        Returns:
            List of NearestResult sorted by distance
        """
        reference = GeoPoint(lat, lon)
        matches = []
        for station in self.located_stations:
            distance = distance_km(reference, station.coordinates)
            if distance <= radius_km:
                matches.append((distance, station))

        # sort is stable: equal distances keep input order
        matches.sort(key=lambda item: item[0])
        return [
            NearestResult(station=station, distance_km=round(distance, 1))
            for distance, station in matches
        ]
