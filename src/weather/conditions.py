"""Typed views over an Open-Meteo forecast payload."""

from dataclasses import dataclass
from typing import Any

from .codes import weather_description, weather_icon, wind_direction


def _code(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


@dataclass
class CurrentConditions:
    """Current weather at the forecast point."""

    time: str | None
    temperature: float | None
    humidity: float | None
    weather_code: int | None
    wind_speed: float | None
    wind_bearing: float | None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "CurrentConditions":
        current = payload.get("current") or {}
        return cls(
            time=current.get("time"),
            temperature=current.get("temperature_2m"),
            humidity=current.get("relative_humidity_2m"),
            weather_code=_code(current.get("weather_code")),
            wind_speed=current.get("wind_speed_10m"),
            wind_bearing=current.get("wind_direction_10m"),
        )

    @property
    def description(self) -> str:
        return weather_description(self.weather_code)

    @property
    def icon(self) -> str:
        return weather_icon(self.weather_code)

    @property
    def wind_cardinal(self) -> str:
        return wind_direction(self.wind_bearing)


@dataclass
class DailyForecast:
    """One day of the daily forecast."""

    date: str
    weather_code: int | None
    temperature_max: float | None
    temperature_min: float | None

    @property
    def description(self) -> str:
        return weather_description(self.weather_code)

    @property
    def icon(self) -> str:
        return weather_icon(self.weather_code)


def daily_forecast(payload: dict[str, Any]) -> list[DailyForecast]:
    """
    Zip the column-oriented `daily` section into one record per day.

    Missing columns yield None values; the day count follows `daily.time`.
    """
    daily = payload.get("daily") or {}
    dates = daily.get("time") or []
    codes = daily.get("weather_code") or []
    highs = daily.get("temperature_2m_max") or []
    lows = daily.get("temperature_2m_min") or []

    def at(values: list, i: int) -> Any:
        return values[i] if i < len(values) else None

    return [
        DailyForecast(
            date=date,
            weather_code=_code(at(codes, i)),
            temperature_max=at(highs, i),
            temperature_min=at(lows, i),
        )
        for i, date in enumerate(dates)
    ]


def units(payload: dict[str, Any], section: str = "current") -> dict[str, str]:
    """Unit labels for a payload section, e.g. {"temperature_2m": "°C"}."""
    return dict(payload.get(f"{section}_units") or {})
