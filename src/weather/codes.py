"""Static lookups for WMO weather codes and wind bearings."""

import math
from types import MappingProxyType

WEATHER_DESCRIPTIONS = MappingProxyType(
    {
        0: "Clear sky",
        1: "Mainly clear",
        2: "Partly cloudy",
        3: "Overcast",
        45: "Fog",
        48: "Depositing rime fog",
        51: "Light drizzle",
        53: "Moderate drizzle",
        55: "Dense drizzle",
        56: "Light freezing drizzle",
        57: "Dense freezing drizzle",
        61: "Slight rain",
        63: "Moderate rain",
        65: "Heavy rain",
        66: "Light freezing rain",
        67: "Heavy freezing rain",
        71: "Slight snow fall",
        73: "Moderate snow fall",
        75: "Heavy snow fall",
        77: "Snow grains",
        80: "Slight rain showers",
        81: "Moderate rain showers",
        82: "Violent rain showers",
        85: "Slight snow showers",
        86: "Heavy snow showers",
        95: "Thunderstorm",
        96: "Thunderstorm with slight hail",
        99: "Thunderstorm with heavy hail",
    }
)

UNKNOWN_DESCRIPTION = "Unknown"

ICON_CLEAR = "☀️"
ICON_PARTLY_CLOUDY = "⛅"
ICON_FOG = "🌫️"
ICON_RAIN = "🌧️"
ICON_SNOW = "❄️"
ICON_THUNDERSTORM = "⛈️"
ICON_UNKNOWN = "❓"

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def weather_description(code: int | None) -> str:
    """Text label for a WMO weather code."""
    return WEATHER_DESCRIPTIONS.get(code, UNKNOWN_DESCRIPTION)


def weather_icon(code: int | None) -> str:
    """Emoji for a WMO weather code, by code band."""
    if code is None:
        return ICON_UNKNOWN
    if code == 0:
        return ICON_CLEAR
    if 1 <= code <= 3:
        return ICON_PARTLY_CLOUDY
    if 45 <= code <= 48:
        return ICON_FOG
    if 51 <= code <= 67:
        return ICON_RAIN
    # Rain showers (80-82) fall in this band too
    if 71 <= code <= 86:
        return ICON_SNOW
    if code >= 95:
        return ICON_THUNDERSTORM
    return ICON_UNKNOWN


def wind_direction(degrees: float | None) -> str:
    """
    Compass label (8 points) for a bearing in degrees.

    Half-way bearings round up (22.5 -> NE). Returns "" for None,
    non-numeric and non-finite bearings.
    """
    if not isinstance(degrees, (int, float)) or not math.isfinite(degrees):
        return ""
    index = math.floor(degrees / 45 + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]
