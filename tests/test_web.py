"""Tests for the web API."""

import pytest
from fastapi.testclient import TestClient

from src.geo import Station
from src.geo.station_resolver import StationResolver
from src.services import UNKNOWN_LOCATION, Location, ServiceError
from src.web import app as web_app

FORECAST = {
    "timezone": "Europe/Berlin",
    "current_units": {"temperature_2m": "°C", "wind_speed_10m": "km/h"},
    "current": {
        "time": "2024-06-01T12:00",
        "temperature_2m": 18.2,
        "relative_humidity_2m": 60,
        "weather_code": 0,
        "wind_speed_10m": 5.0,
        "wind_direction_10m": 90,
    },
    "daily": {
        "time": ["2024-06-01"],
        "weather_code": [3],
        "temperature_2m_max": [21.0],
        "temperature_2m_min": [11.0],
    },
}

STATIONS = [
    Station.from_dict(
        {
            "stationuuid": "u1",
            "name": "Radio Eins",
            "url": "http://stream.test/eins",
            "countrycode": "DE",
            "state": "Berlin",
            "bitrate": 128,
            "geo_lat": 52.51,
            "geo_long": 13.40,
        }
    ),
]


class StubGeocoder:
    def __init__(self, location):
        self.location = location

    def reverse_geocode(self, lat, lon):
        return self.location


class StubDirectory:
    def __init__(self, stations):
        self.stations = stations
        self.calls = []

    def search_by_state(self, country_code, state):
        self.calls.append(("state", country_code, state))
        return self.stations

    def search_by_country(self, country_code):
        self.calls.append(("country", country_code))
        return self.stations


class StubWeather:
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error

    def get_forecast(self, lat, lon):
        if self.error:
            raise self.error
        return self.payload


@pytest.fixture
def install(monkeypatch):
    """Install stub clients as the app's globals."""

    def _install(location=None, stations=(), weather=None):
        geocoder = StubGeocoder(location or Location("Berlin", "de", "Berlin"))
        directory = StubDirectory(list(stations))
        monkeypatch.setattr(web_app, "geocoder", geocoder)
        monkeypatch.setattr(web_app, "directory", directory)
        monkeypatch.setattr(web_app, "weather_client", weather or StubWeather(FORECAST))
        monkeypatch.setattr(web_app, "resolver", StationResolver(geocoder, directory))
        return directory

    return _install


@pytest.fixture
def client():
    return TestClient(web_app.app)


class TestLocationEndpoint:
    def test_location(self, install, client):
        install()
        response = client.get("/api/location", params={"lat": 52.52, "lon": 13.405})
        assert response.status_code == 200
        assert response.json() == {"name": "Berlin", "country_code": "de", "state": "Berlin"}

    def test_out_of_range(self, install, client):
        install()
        response = client.get("/api/location", params={"lat": 95, "lon": 0})
        assert response.status_code == 422

    def test_not_initialized(self, client, monkeypatch):
        monkeypatch.setattr(web_app, "geocoder", None)
        response = client.get("/api/location", params={"lat": 1, "lon": 1})
        assert response.status_code == 503


class TestWeatherEndpoint:
    def test_weather(self, install, client):
        install()
        data = client.get("/api/weather", params={"lat": 52.52, "lon": 13.405}).json()
        assert data["timezone"] == "Europe/Berlin"
        assert data["current"]["description"] == "Clear sky"
        assert data["current"]["wind_direction"] == "E"
        assert data["daily"][0]["description"] == "Overcast"
        assert data["current_units"] == {"temperature_2m": "°C", "wind_speed_10m": "km/h"}
        assert data["daily_units"] == {}

    def test_weather_failure_is_502(self, install, client):
        install(weather=StubWeather(error=ServiceError("Weather API returned HTTP 500", status=500)))
        response = client.get("/api/weather", params={"lat": 52.52, "lon": 13.405})
        assert response.status_code == 502
        assert "HTTP 500" in response.json()["detail"]


class TestStationsEndpoint:
    def test_by_country(self, install, client):
        directory = install(stations=STATIONS)
        data = client.get("/api/stations", params={"country": "DE"}).json()
        assert [s["name"] for s in data] == ["Radio Eins"]
        assert data[0]["stream_url"] == "http://stream.test/eins"
        assert directory.calls == [("country", "DE")]

    def test_by_state(self, install, client):
        directory = install(stations=STATIONS)
        client.get("/api/stations", params={"country": "DE", "state": "Berlin"})
        assert directory.calls == [("state", "DE", "Berlin")]

    def test_bad_country(self, install, client):
        install()
        assert client.get("/api/stations", params={"country": "DEU"}).status_code == 422


class TestNearestEndpoint:
    def test_nearest(self, install, client):
        install(stations=STATIONS)
        data = client.get("/api/nearest", params={"lat": 52.52, "lon": 13.405}).json()
        assert data["location"]["name"] == "Berlin"
        assert data["station"]["stationuuid"] == "u1"
        assert data["scope"] == "state"
        assert data["distance_km"] == pytest.approx(1.1, abs=0.5)

    def test_nothing_found(self, install, client):
        install(location=UNKNOWN_LOCATION, stations=STATIONS)
        data = client.get("/api/nearest", params={"lat": 0.5, "lon": -30}).json()
        assert data["location"]["name"] == "Unknown Location"
        assert data["station"] is None
        assert data["distance_km"] is None


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
