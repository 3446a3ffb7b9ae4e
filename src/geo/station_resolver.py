"""Resolve a coordinate to the nearest local radio station."""

import logging
from dataclasses import dataclass
from typing import Literal

from ..services.nominatim import Location, ReverseGeocodeClient
from ..services.radio_browser import RadioDirectoryClient
from .nearest_station import NearestStationFinder, Station

logger = logging.getLogger(__name__)


@dataclass
class ResolvedStation:
    """Result of resolving a coordinate to a station."""

    location: Location
    station: Station
    distance_km: float
    scope: Literal["state", "country"]  # Which directory search found it


class StationResolver:
    """
    Resolve coordinates to the nearest radio station.

    The point is reverse geocoded first. Stations from the same state are
    preferred; if none has a usable position the whole country is searched.
    """

    def __init__(
        self,
        geocoder: ReverseGeocodeClient | None = None,
        directory: RadioDirectoryClient | None = None,
    ):
        """
        Initialize resolver with its API clients.

        Args:
            geocoder: Reverse geocoding client
            directory: Radio directory client
        """
        self.geocoder = geocoder or ReverseGeocodeClient()
        self.directory = directory or RadioDirectoryClient()

    def locate(self, lat: float, lon: float) -> Location:
        """Reverse geocode a point."""
        return self.geocoder.reverse_geocode(lat, lon)

    def resolve(
        self, lat: float, lon: float, location: Location | None = None
    ) -> ResolvedStation | None:
        """
        Find the nearest station to a point.

        Args:
            lat: Latitude (degrees)
            lon: Longitude (degrees)
            location: Already geocoded location for the point, if any

        Returns:
            ResolvedStation, or None if the country is unknown or no station
            has usable coordinates
        """
        if location is None:
            location = self.locate(lat, lon)

        if not location.country_code:
            logger.info("No country for %.4f,%.4f, skipping station search", lat, lon)
            return None

        # Case 1: stations in the same state
        if location.state:
            stations = self.directory.search_by_state(location.country_code, location.state)
            result = NearestStationFinder(stations).find_nearest(lat, lon)
            if result:
                return ResolvedStation(location, result.station, result.distance_km, "state")
            logger.info(
                "No located station in %s/%s, falling back to country",
                location.country_code, location.state,
            )

        # Case 2: whole country
        stations = self.directory.search_by_country(location.country_code)
        result = NearestStationFinder(stations).find_nearest(lat, lon)
        if not result:
            return None

        return ResolvedStation(location, result.station, result.distance_km, "country")
