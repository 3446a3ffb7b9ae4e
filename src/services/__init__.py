"""REST API clients for the station directory, weather and geocoding."""

from .base import ApiClient, ErrorPolicy, ServiceError
from .nominatim import UNKNOWN_LOCATION, Location, ReverseGeocodeClient
from .open_meteo import WeatherClient
from .radio_browser import RadioDirectoryClient

__all__ = [
    "ApiClient",
    "ErrorPolicy",
    "ServiceError",
    "Location",
    "UNKNOWN_LOCATION",
    "RadioDirectoryClient",
    "ReverseGeocodeClient",
    "WeatherClient",
]
