"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Query
from pydantic import ValidationError

from weatherdash.core.exceptions import BadRequestException
from weatherdash.schemas.location import Location
from weatherdash.services.airvisual_service import AirVisualService
from weatherdash.services.mock_service import MockService
from weatherdash.services.open_meteo_service import OpenMeteoService
from weatherdash.services.openweather_service import OpenWeatherService


async def get_location(
    lat: Annotated[float | None, Query(ge=-90, le=90, description="Latitude")] = None,
    lon: Annotated[float | None, Query(ge=-180, le=180, description="Longitude")] = None,
    city: Annotated[str | None, Query(min_length=1, max_length=120)] = None,
    state: Annotated[str | None, Query(max_length=120)] = None,
    country: Annotated[str | None, Query(max_length=120)] = None,
) -> Location:
    """
    Build the requested location from query parameters.

    Args:
        lat: Latitude coordinate
        lon: Longitude coordinate
        city: City name
        state: Optional state, used by AirVisual
        country: Optional country, used by AirVisual

    Returns:
        Validated location

    Raises:
        BadRequestException: If neither or both of coordinates and city are given
    """
    try:
        return Location(latitude=lat, longitude=lon, city=city, state=state, country=country)
    except ValidationError as e:
        message = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise BadRequestException(message) from e


def get_open_meteo_service() -> OpenMeteoService:
    """Get Open-Meteo service instance."""
    return OpenMeteoService()


def get_openweather_service() -> OpenWeatherService:
    """Get OpenWeatherMap service instance."""
    return OpenWeatherService()


def get_airvisual_service() -> AirVisualService:
    """Get AirVisual service instance."""
    return AirVisualService()


def get_mock_service() -> MockService:
    """Get mock data service instance."""
    return MockService()


# Type aliases for dependency injection
LocationDep = Annotated[Location, Depends(get_location)]
OpenMeteoServiceDep = Annotated[OpenMeteoService, Depends(get_open_meteo_service)]
OpenWeatherServiceDep = Annotated[OpenWeatherService, Depends(get_openweather_service)]
AirVisualServiceDep = Annotated[AirVisualService, Depends(get_airvisual_service)]
MockServiceDep = Annotated[MockService, Depends(get_mock_service)]
