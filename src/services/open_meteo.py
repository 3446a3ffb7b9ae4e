"""Client for the Open-Meteo forecast API."""

from typing import Any

from ..config import OPEN_METEO_URL
from .base import ApiClient, ErrorPolicy, ServiceError

CURRENT_FIELDS = [
    "temperature_2m",
    "relative_humidity_2m",
    "weather_code",
    "wind_speed_10m",
    "wind_direction_10m",
]
DAILY_FIELDS = ["weather_code", "temperature_2m_max", "temperature_2m_min"]


class WeatherClient(ApiClient):
    """Fetch current conditions and a daily forecast. Failures propagate."""

    service_name = "Weather API"
    base_url = OPEN_METEO_URL
    error_policy = ErrorPolicy.RAISE

    def get_forecast(self, lat: float, lon: float) -> dict[str, Any] | None:
        """
        Fetch the forecast payload for a point.

        Args:
            lat: Latitude (degrees)
            lon: Longitude (degrees)

        Returns:
            Raw Open-Meteo JSON with `current` and `daily` sections, or None
            when the client was built with ErrorPolicy.DEFAULT and the call failed

        Raises:
            ServiceError: On failure with the default RAISE policy
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": ",".join(CURRENT_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
        }
        try:
            payload = self._get_json(self.base_url, params=params)
            if not isinstance(payload, dict):
                raise ServiceError(f"{self.service_name} returned a non-object payload")
        except ServiceError as e:
            return self._handle_failure(e, None)
        return payload
