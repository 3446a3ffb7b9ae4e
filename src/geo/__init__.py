"""Geolocation module for finding nearest stations."""

from .distance import EARTH_RADIUS_KM, GeoPoint, distance_km, haversine
from .nearest_station import NearestResult, NearestStationFinder, Station, find_nearest

__all__ = [
    "EARTH_RADIUS_KM",
    "GeoPoint",
    "distance_km",
    "haversine",
    "Station",
    "NearestResult",
    "NearestStationFinder",
    "find_nearest",
]
