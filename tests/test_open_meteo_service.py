"""Tests for the Open-Meteo weather, air quality and geocoding service."""

import httpx
import pytest

from weatherdash.core.exceptions import ProviderError
from weatherdash.schemas.location import Location
from weatherdash.services.open_meteo_service import OpenMeteoService

BERLIN = Location(latitude=52.52, longitude=13.41)


@pytest.mark.asyncio
async def test_get_weather_by_coordinates(make_transport, open_meteo_payload: dict) -> None:
    """Test current conditions and grouped forecast from coordinates."""
    transport = make_transport({"/v1/forecast": open_meteo_payload})
    service = OpenMeteoService(transport=transport)

    result = await service.get_weather(BERLIN)

    current = result.current
    assert current.temperature == 13.4
    assert current.humidity == 71
    assert current.wind_speed == 9.7
    assert (current.description, current.icon) == ("Partly Cloudy", "⛅")
    assert current.city == "52.52°N, 13.41°E"
    assert current.country == "Europe/Berlin"

    assert [(f.date, f.temperature_max, f.temperature_min, f.description) for f in result.forecast] == [
        ("Tomorrow", 20.0, 8.0, "Snow"),
        ("Day After", 18.0, 9.0, "Rain"),
        ("3 Days", 16.0, 7.0, "Overcast"),
    ]

    assert len(transport.requests) == 1
    params = transport.requests[0].url.params
    assert params["latitude"] == "52.52"
    assert params["longitude"] == "13.41"
    assert params["timezone"] == "auto"
    assert "cloud_cover" in params["hourly"]


@pytest.mark.asyncio
async def test_get_weather_by_city_geocodes_first(
    make_transport,
    open_meteo_payload: dict,
    geocoding_payload: dict,
) -> None:
    """Test a city name is resolved through geocoding before the forecast call."""
    transport = make_transport(
        {"/v1/search": geocoding_payload, "/v1/forecast": open_meteo_payload}
    )
    service = OpenMeteoService(transport=transport)

    result = await service.get_weather(Location(city="Berlin"))

    assert result.current.city == "Berlin"
    assert result.current.country == "Germany"
    assert [r.url.path for r in transport.requests] == ["/v1/search", "/v1/forecast"]
    assert transport.requests[0].url.params["name"] == "Berlin"
    assert transport.requests[1].url.params["latitude"] == "52.52437"


@pytest.mark.asyncio
async def test_get_weather_without_current_block_uses_first_hour(
    make_transport,
    open_meteo_payload: dict,
) -> None:
    """Test the first hourly sample stands in for current conditions."""
    del open_meteo_payload["current"]
    service = OpenMeteoService(transport=make_transport({"/v1/forecast": open_meteo_payload}))

    result = await service.get_weather(BERLIN)

    assert result.current.temperature == 10.0
    assert result.current.humidity == 70
    assert result.current.description == "Clear"


@pytest.mark.asyncio
async def test_get_weather_without_any_current_temperature(
    make_transport,
    open_meteo_payload: dict,
) -> None:
    """Test a missing first-hour temperature fails instead of reporting 0 °C."""
    del open_meteo_payload["current"]
    open_meteo_payload["hourly"]["temperature_2m"][0] = None
    service = OpenMeteoService(transport=make_transport({"/v1/forecast": open_meteo_payload}))

    with pytest.raises(ProviderError, match="Failed to parse weather data: no current temperature"):
        await service.get_weather(BERLIN)


@pytest.mark.asyncio
async def test_unknown_city(make_transport) -> None:
    """Test geocoding with no match fails with a readable message."""
    service = OpenMeteoService(transport=make_transport({"/v1/search": {"generationtime_ms": 0.5}}))

    with pytest.raises(ProviderError, match="Could not find location: Atlantis"):
        await service.get_weather(Location(city="Atlantis"))


@pytest.mark.asyncio
async def test_http_error_status(make_transport) -> None:
    """Test non-success statuses collapse into a ProviderError."""
    transport = make_transport(
        {"/v1/forecast": lambda request: httpx.Response(500, json={"reason": "down"})}
    )
    service = OpenMeteoService(transport=transport)

    with pytest.raises(ProviderError) as exc_info:
        await service.get_weather(BERLIN)

    assert exc_info.value.message == "Weather API error: 500 Internal Server Error"
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_network_failure(make_transport) -> None:
    """Test transport errors collapse into a ProviderError."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    service = OpenMeteoService(transport=make_transport({"/v1/forecast": refuse}))

    with pytest.raises(ProviderError, match="Failed to fetch weather data: connection refused"):
        await service.get_weather(BERLIN)


@pytest.mark.asyncio
async def test_malformed_payload(make_transport) -> None:
    """Test undecodable and schema-mismatched bodies collapse into a ProviderError."""
    not_json = make_transport({"/v1/forecast": lambda request: httpx.Response(200, text="<html>")})
    wrong_shape = make_transport({"/v1/forecast": {"latitude": 1.0}})

    with pytest.raises(ProviderError, match="Failed to parse weather data"):
        await OpenMeteoService(transport=not_json).get_weather(BERLIN)
    with pytest.raises(ProviderError, match="Failed to parse weather data"):
        await OpenMeteoService(transport=wrong_shape).get_weather(BERLIN)


@pytest.mark.asyncio
async def test_get_air_quality(make_transport, open_meteo_air_payload: dict) -> None:
    """Test AQI banding and gas conversion to ppm."""
    transport = make_transport({"/v1/air-quality": open_meteo_air_payload})
    service = OpenMeteoService(transport=transport)

    reading = await service.get_air_quality(BERLIN)

    assert reading.aqi == 72
    assert (reading.category, reading.color) == ("Moderate", "#FFFF00")
    assert reading.pm25 == pytest.approx(21.3)
    assert reading.pm10 == pytest.approx(30.15)
    assert reading.o3 == pytest.approx(0.0489, abs=1e-4)
    assert reading.no2 == pytest.approx(0.01, abs=1e-4)
    assert reading.co == pytest.approx(0.2095, abs=1e-4)
    assert "us_aqi" in transport.requests[0].url.params["current"]


@pytest.mark.asyncio
async def test_get_air_quality_without_index(make_transport, open_meteo_air_payload: dict) -> None:
    """Test a missing AQI is reported as a parse failure."""
    open_meteo_air_payload["current"]["us_aqi"] = None
    service = OpenMeteoService(transport=make_transport({"/v1/air-quality": open_meteo_air_payload}))

    with pytest.raises(ProviderError, match="Failed to parse air quality data"):
        await service.get_air_quality(BERLIN)
