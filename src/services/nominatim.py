"""Reverse geocoding through OpenStreetMap Nominatim."""

from dataclasses import dataclass

from ..config import NOMINATIM_URL
from .base import ApiClient, ErrorPolicy, ServiceError

UNKNOWN_NAME = "Unknown Location"

# Address keys tried in order for the display name
NAME_KEYS = ("city", "town", "village", "hamlet", "suburb")


@dataclass(frozen=True)
class Location:
    """Human readable place for a coordinate."""

    name: str
    country_code: str = ""
    state: str = ""


UNKNOWN_LOCATION = Location(UNKNOWN_NAME, "", "")


def location_from_payload(payload: dict) -> Location:
    """
    Build a Location from a Nominatim `format=json` reverse response.

    The name falls back through city, town, village, hamlet, suburb, then the
    first segment of `display_name`, then "Unknown Location".
    """
    address = payload.get("address")
    if not isinstance(address, dict):
        raise ServiceError(payload.get("error") or "Nominatim response has no address")

    name = next((address[key] for key in NAME_KEYS if address.get(key)), None)
    if not name:
        display_name = payload.get("display_name") or ""
        name = display_name.split(",")[0].strip() or UNKNOWN_NAME

    return Location(
        name=name,
        country_code=address.get("country_code") or "",
        state=address.get("state") or address.get("region") or "",
    )


class ReverseGeocodeClient(ApiClient):
    """Turn coordinates into a place name. Failures return UNKNOWN_LOCATION."""

    service_name = "Geocoding"
    base_url = NOMINATIM_URL
    error_policy = ErrorPolicy.DEFAULT

    def reverse_geocode(self, lat: float, lon: float) -> Location:
        """
        Resolve a point to a Location.

        Args:
            lat: Latitude (degrees)
            lon: Longitude (degrees)

        Returns:
            Location, or UNKNOWN_LOCATION if the lookup failed
        """
        params = {"format": "json", "lat": lat, "lon": lon}
        try:
            payload = self._get_json(self.base_url, params=params)
            if not isinstance(payload, dict):
                raise ServiceError(f"{self.service_name} returned a non-object payload")
            return location_from_payload(payload)
        except ServiceError as e:
            return self._handle_failure(e, UNKNOWN_LOCATION)
