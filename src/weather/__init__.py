"""Weather code lookups and forecast views."""

from .codes import weather_description, weather_icon, wind_direction
from .conditions import CurrentConditions, DailyForecast, daily_forecast, units

__all__ = [
    "weather_description",
    "weather_icon",
    "wind_direction",
    "CurrentConditions",
    "DailyForecast",
    "daily_forecast",
    "units",
]
