from fastapi import APIRouter, Query, status

from weatherdash.dependencies import LocationDep, OpenMeteoServiceDep, OpenWeatherServiceDep
from weatherdash.schemas.weather import WeatherProvider, WeatherResponse

router = APIRouter()


@router.get(
    "",
    response_model=WeatherResponse,
    status_code=status.HTTP_200_OK,
    summary="Get current weather and a three-day forecast",
)
async def get_weather(
    location: LocationDep,
    open_meteo: OpenMeteoServiceDep,
    openweather: OpenWeatherServiceDep,
    provider: WeatherProvider = Query(default=WeatherProvider.OPEN_METEO),
) -> WeatherResponse:
    """
    Fetch current conditions and forecast by coordinates or city.

    Args:
        location: Coordinates (``lat``/``lon``) or ``city``
        open_meteo: Open-Meteo service
        openweather: OpenWeatherMap service
        provider: Upstream provider to query

    Returns:
        Current conditions plus up to three forecast days

    Raises:
        ProviderError: If the provider fails or is not configured
    """
    if provider == WeatherProvider.OPENWEATHERMAP:
        return await openweather.get_weather(location)
    return await open_meteo.get_weather(location)
