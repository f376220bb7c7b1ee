"""Demo endpoints returning fixed data."""

from fastapi import APIRouter, status

from weatherdash.dependencies import LocationDep, MockServiceDep
from weatherdash.schemas.weather import AirQualityReading, WeatherResponse

router = APIRouter()


@router.get(
    "/weather",
    response_model=WeatherResponse,
    status_code=status.HTTP_200_OK,
    summary="Get demo weather",
)
async def get_mock_weather(location: LocationDep, mock: MockServiceDep) -> WeatherResponse:
    """
    Demo weather for running the dashboard without API keys.

    Returns:
        Fixed current conditions and forecast labelled with the location
    """
    return mock.get_weather(location)


@router.get(
    "/air-quality",
    response_model=AirQualityReading,
    status_code=status.HTTP_200_OK,
    summary="Get demo air quality",
)
async def get_mock_air_quality(location: LocationDep, mock: MockServiceDep) -> AirQualityReading:
    """Demo air quality reading."""
    return mock.get_air_quality(location)
