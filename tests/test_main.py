"""Tests for the command line entry point."""

from src.geo import NearestStationFinder, Station
from src.main import build_report, format_location, format_station, format_weather
from src.services import Location, ServiceError

FORECAST = {
    "current": {
        "temperature_2m": 18.2,
        "relative_humidity_2m": 60,
        "weather_code": 2,
        "wind_speed_10m": 12.0,
        "wind_direction_10m": 315,
    },
    "daily": {
        "time": ["2024-06-01"],
        "weather_code": [61],
        "temperature_2m_max": [21.0],
        "temperature_2m_min": [11.0],
    },
}


class StubResolver:
    def __init__(self, location, resolved=None):
        self.location = location
        self.resolved = resolved

    def locate(self, lat, lon):
        return self.location

    def resolve(self, lat, lon, location=None):
        return self.resolved


class StubWeather:
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error

    def get_forecast(self, lat, lon):
        if self.error:
            raise self.error
        return self.payload


class TestFormatting:
    def test_format_location(self):
        assert format_location(Location("Berlin", "de", "Berlin")) == "Berlin (Berlin, DE)"
        assert format_location(Location("Unknown Location")) == "Unknown Location"

    def test_format_station(self):
        assert format_station(None) == "Nearest station: none found"
        text = format_station(
            {"name": "Radio Eins", "distance_km": 1.2, "scope": "state", "stream_url": "http://s"}
        )
        assert text.startswith("Nearest station: Radio Eins - 1.2 km [state]")

    def test_format_weather(self):
        text = format_weather(FORECAST)
        assert "18.2°C" in text
        assert "wind 12.0 km/h" in text
        assert "Partly cloudy" in text
        assert "NW" in text
        assert "2024-06-01" in text
        assert "Slight rain" in text


class TestBuildReport:
    def test_with_snapshot(self):
        finder = NearestStationFinder(
            [Station.from_dict({"name": "Radio Eins", "geo_lat": 52.51, "geo_long": 13.40})]
        )
        resolver = StubResolver(Location("Berlin", "de", "Berlin"))

        report, error = build_report(52.52, 13.405, resolver, StubWeather(FORECAST), finder)

        assert error is None
        assert report["station"]["name"] == "Radio Eins"
        assert report["location"]["country_code"] == "de"
        assert report["weather"] == FORECAST

    def test_weather_error_is_returned(self):
        resolver = StubResolver(Location("Berlin", "de", "Berlin"))
        failure = ServiceError("Weather API returned HTTP 500", status=500)

        report, error = build_report(52.52, 13.405, resolver, StubWeather(error=failure))

        assert error is failure
        assert report["weather"] is None
        assert report["station"] is None

    def test_without_weather(self):
        resolver = StubResolver(Location("Unknown Location"))
        report, error = build_report(1.0, 2.0, resolver, None)
        assert error is None
        assert report["weather"] is None


class TestWeatherUnits:
    def test_units_from_payload(self):
        payload = {
            **FORECAST,
            "current_units": {
                "temperature_2m": "°F",
                "relative_humidity_2m": "%",
                "wind_speed_10m": "mp/h",
            },
            "daily_units": {"temperature_2m_max": "°F"},
        }
        text = format_weather(payload)
        assert "18.2°F" in text
        assert "wind 12.0 mp/h NW" in text
        assert "11.0°F / 21.0°F" in text
