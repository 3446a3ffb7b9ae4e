"""
FastAPI web interface for Nearby Radio.

JSON endpoints for the location, weather and station lookups.
"""

import logging

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from src.config import LOG_LEVEL
from src.geo import Station
from src.geo.station_resolver import StationResolver
from src.services import RadioDirectoryClient, ReverseGeocodeClient, ServiceError, WeatherClient
from src.weather import CurrentConditions, daily_forecast, units

logger = logging.getLogger(__name__)

# Initialize FastAPI
app = FastAPI(
    title="Nearby Radio",
    description="Nearest radio station and local weather for a coordinate",
    version="0.1.0",
)

# Global instances (created on startup)
geocoder = None
directory = None
weather_client = None
resolver = None


@app.on_event("startup")
async def startup_event():
    """Create API clients on startup."""
    global geocoder, directory, weather_client, resolver

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    geocoder = ReverseGeocodeClient()
    directory = RadioDirectoryClient()
    weather_client = WeatherClient()
    resolver = StationResolver(geocoder=geocoder, directory=directory)
    logger.info("API clients ready")


@app.on_event("shutdown")
async def shutdown_event():
    """Close HTTP sessions."""
    for client in (geocoder, directory, weather_client):
        if client is not None:
            client.close()


class LocationResponse(BaseModel):
    """Reverse geocoding result."""

    name: str
    country_code: str
    state: str


class StationResponse(BaseModel):
    """Radio station summary."""

    stationuuid: str
    name: str
    stream_url: str
    homepage: str
    favicon: str
    tags: str
    country: str
    countrycode: str
    state: str
    codec: str
    bitrate: int
    clickcount: int
    geo_lat: float | None = None
    geo_long: float | None = None

    @classmethod
    def from_station(cls, station: Station) -> "StationResponse":
        return cls(
            stationuuid=station.stationuuid,
            name=station.name,
            stream_url=station.stream_url,
            homepage=station.homepage,
            favicon=station.favicon,
            tags=station.tags,
            country=station.country,
            countrycode=station.countrycode,
            state=station.state,
            codec=station.codec,
            bitrate=station.bitrate,
            clickcount=station.clickcount,
            geo_lat=station.geo_lat,
            geo_long=station.geo_long,
        )


class NearestResponse(BaseModel):
    """Nearest station to a coordinate."""

    location: LocationResponse
    station: StationResponse | None = None
    distance_km: float | None = None
    scope: str | None = None  # "state" or "country"


class CurrentWeather(BaseModel):
    """Current conditions with display labels."""

    time: str | None = None
    temperature: float | None = None
    humidity: float | None = None
    weather_code: int | None = None
    description: str
    icon: str
    wind_speed: float | None = None
    wind_bearing: float | None = None
    wind_direction: str


class DailyWeather(BaseModel):
    """One day of forecast."""

    date: str
    weather_code: int | None = None
    description: str
    icon: str
    temperature_max: float | None = None
    temperature_min: float | None = None


class WeatherResponse(BaseModel):
    """Forecast for a coordinate."""

    timezone: str | None = None
    current: CurrentWeather
    daily: list[DailyWeather]
    current_units: dict[str, str] = {}
    daily_units: dict[str, str] = {}


def _require(client):
    if client is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return client


def build_weather_response(payload: dict) -> WeatherResponse:
    """Convert an Open-Meteo payload to the API response model."""
    current = CurrentConditions.from_payload(payload)
    return WeatherResponse(
        timezone=payload.get("timezone"),
        current=CurrentWeather(
            time=current.time,
            temperature=current.temperature,
            humidity=current.humidity,
            weather_code=current.weather_code,
            description=current.description,
            icon=current.icon,
            wind_speed=current.wind_speed,
            wind_bearing=current.wind_bearing,
            wind_direction=current.wind_cardinal,
        ),
        daily=[
            DailyWeather(
                date=day.date,
                weather_code=day.weather_code,
                description=day.description,
                icon=day.icon,
                temperature_max=day.temperature_max,
                temperature_min=day.temperature_min,
            )
            for day in daily_forecast(payload)
        ],
        current_units=units(payload),
        daily_units=units(payload, "daily"),
    )


@app.get("/api/location", response_model=LocationResponse)
def api_location(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
) -> LocationResponse:
    """Reverse geocode a coordinate. Unknown places return "Unknown Location"."""
    location = _require(geocoder).reverse_geocode(lat, lon)
    return LocationResponse(
        name=location.name, country_code=location.country_code, state=location.state
    )


@app.get("/api/weather", response_model=WeatherResponse)
def api_weather(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
) -> WeatherResponse:
    """Current weather and daily forecast. Upstream failures return 502."""
    try:
        payload = _require(weather_client).get_forecast(lat, lon)
    except ServiceError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    if payload is None:
        raise HTTPException(status_code=502, detail="Weather unavailable")
    return build_weather_response(payload)


@app.get("/api/stations", response_model=list[StationResponse])
def api_stations(
    country: str = Query(..., min_length=2, max_length=2),
    state: str | None = Query(default=None),
) -> list[StationResponse]:
    """Stations in a country, optionally restricted to a state."""
    client = _require(directory)
    if state:
        stations = client.search_by_state(country, state)
    else:
        stations = client.search_by_country(country)
    return [StationResponse.from_station(s) for s in stations]


@app.get("/api/nearest", response_model=NearestResponse)
def api_nearest(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
) -> NearestResponse:
    """Nearest station to a coordinate, searched within its state then country."""
    station_resolver = _require(resolver)
    location = station_resolver.locate(lat, lon)
    resolved = station_resolver.resolve(lat, lon, location=location)

    response = NearestResponse(
        location=LocationResponse(
            name=location.name, country_code=location.country_code, state=location.state
        )
    )
    if resolved is not None:
        response.station = StationResponse.from_station(resolved.station)
        response.distance_km = resolved.distance_km
        response.scope = resolved.scope
    return response


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "geocoder_loaded": geocoder is not None,
        "directory_loaded": directory is not None,
        "weather_loaded": weather_client is not None,
        "resolver_loaded": resolver is not None,
    }
