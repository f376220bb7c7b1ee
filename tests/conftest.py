from collections.abc import AsyncGenerator, Callable
from datetime import UTC, datetime

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from weatherdash.main import app

Handler = Callable[[httpx.Request], httpx.Response]


def utc_timestamp(text: str) -> int:
    """Unix seconds for a ``YYYY-MM-DD HH:MM:SS`` UTC wall-clock string."""
    return int(datetime.fromisoformat(text).replace(tzinfo=UTC).timestamp())


class RecordingTransport(httpx.MockTransport):
    """MockTransport that routes by URL path and keeps every request it saw."""

    def __init__(self, routes: dict[str, dict | Handler]):
        self.routes = routes
        self.requests: list[httpx.Request] = []
        super().__init__(self._dispatch)

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for suffix, route in self.routes.items():
            if request.url.path.endswith(suffix):
                if callable(route):
                    return route(request)
                return httpx.Response(200, json=route)
        return httpx.Response(404, json={"error": f"no route for {request.url.path}"})


@pytest.fixture
def make_transport() -> Callable[[dict[str, dict | Handler]], RecordingTransport]:
    """Factory for routed mock transports; tests never touch the network."""
    return RecordingTransport


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


def _hourly_day(date: str, temps: list[float], **series: list[float]) -> dict[str, list]:
    hours = ["00:00", "06:00", "12:00", "18:00"]
    day = {
        "time": [f"{date}T{hour}" for hour in hours],
        "temperature_2m": temps,
        "relative_humidity_2m": [70.0] * 4,
        "wind_speed_10m": [10.0] * 4,
        "rain": [0.0] * 4,
        "showers": [0.0] * 4,
        "snowfall": [0.0] * 4,
        "cloud_cover": [0.0] * 4,
    }
    day.update(series)
    return day


@pytest.fixture
def open_meteo_payload() -> dict:
    """Open-Meteo forecast with today plus four more days of 6-hourly samples."""
    days = [
        _hourly_day("2025-09-17", [10.0, 12.0, 15.0, 11.0]),
        _hourly_day(
            "2025-09-18",
            [8.0, 14.0, 20.0, 12.0],
            snowfall=[0.0, 0.5, 0.0, 0.0],
            rain=[1.0, 0.0, 0.0, 0.0],
        ),
        _hourly_day("2025-09-19", [9.0, 13.0, 18.0, 10.0], showers=[0.0, 0.0, 0.2, 0.0]),
        _hourly_day("2025-09-20", [7.0, 11.0, 16.0, 9.0], cloud_cover=[90.0, 85.0, 95.0, 88.0]),
        _hourly_day("2025-09-21", [15.0, 19.0, 25.0, 17.0]),
    ]
    hourly: dict[str, list] = {key: [] for key in days[0]}
    for day in days:
        for key, values in day.items():
            hourly[key].extend(values)

    return {
        "latitude": 52.52,
        "longitude": 13.41,
        "timezone": "Europe/Berlin",
        "current": {
            "time": "2025-09-17T14:00",
            "temperature_2m": 13.4,
            "relative_humidity_2m": 71.0,
            "wind_speed_10m": 9.7,
            "rain": 0.0,
            "showers": 0.0,
            "snowfall": 0.0,
            "cloud_cover": 60.0,
        },
        "hourly": hourly,
    }


@pytest.fixture
def open_meteo_air_payload() -> dict:
    """Open-Meteo air quality payload (µg/m³)."""
    return {
        "latitude": 52.52,
        "longitude": 13.41,
        "current": {
            "time": "2025-09-17T14:00",
            "us_aqi": 72.4,
            "pm2_5": 21.3,
            "pm10": 30.15,
            "ozone": 96.0,
            "nitrogen_dioxide": 18.8,
            "sulphur_dioxide": 2.6,
            "carbon_monoxide": 240.0,
        },
    }


@pytest.fixture
def geocoding_payload() -> dict:
    """Open-Meteo geocoding payload with a single match."""
    return {
        "results": [
            {
                "name": "Berlin",
                "latitude": 52.52437,
                "longitude": 13.41053,
                "country": "Germany",
                "admin1": "Land Berlin",
                "timezone": "Europe/Berlin",
            }
        ]
    }


@pytest.fixture
def openweather_current_payload() -> dict:
    """OpenWeatherMap /weather payload."""
    return {
        "coord": {"lon": 13.41, "lat": 52.52},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "main": {"temp": 18.3, "feels_like": 17.9, "humidity": 60, "pressure": 1012},
        "wind": {"speed": 4.1, "deg": 250},
        "sys": {"country": "DE"},
        "name": "Berlin",
        "dt": utc_timestamp("2025-09-17 15:00:00"),
        "timezone": 0,
        "cod": 200,
    }


@pytest.fixture
def openweather_forecast_payload() -> dict:
    """OpenWeatherMap /forecast payload covering today and three more days."""

    def item(dt_txt: str, temp: float, clouds: float = 0.0, **extra: dict) -> dict:
        entry = {
            "dt": utc_timestamp(dt_txt),
            "dt_txt": dt_txt,
            "main": {"temp": temp, "humidity": 55},
            "clouds": {"all": clouds},
        }
        entry.update(extra)
        return entry

    return {
        "cod": "200",
        "cnt": 9,
        "list": [
            item("2025-09-17 18:00:00", 16.0),
            item("2025-09-17 21:00:00", 14.0),
            item("2025-09-18 00:00:00", 11.0, clouds=40.0),
            item("2025-09-18 12:00:00", 21.0, clouds=40.0),
            item("2025-09-19 00:00:00", 10.0, rain={"3h": 0.4}),
            item("2025-09-19 12:00:00", 17.5, clouds=100.0),
            item("2025-09-20 00:00:00", -1.0, snow={"3h": 1.2}),
            item("2025-09-20 12:00:00", 3.0),
            item("2025-09-21 12:00:00", 22.0),
        ],
        "city": {"name": "Berlin", "country": "DE", "timezone": 0},
    }


@pytest.fixture
def airvisual_payload() -> dict:
    """AirVisual /city payload."""
    return {
        "status": "success",
        "data": {
            "city": "Los Angeles",
            "state": "California",
            "country": "USA",
            "current": {
                "pollution": {
                    "ts": "2025-09-17T14:00:00.000Z",
                    "aqius": 120,
                    "mainus": "p2",
                    "aqicn": 61,
                    "maincn": "p2",
                }
            },
        },
    }
