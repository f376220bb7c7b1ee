from fastapi import APIRouter, Query, status

from weatherdash.dependencies import AirVisualServiceDep, LocationDep, OpenMeteoServiceDep
from weatherdash.schemas.weather import AirQualityProvider, AirQualityReading

router = APIRouter()


@router.get(
    "",
    response_model=AirQualityReading,
    status_code=status.HTTP_200_OK,
    summary="Get AQI and pollutant concentrations",
)
async def get_air_quality(
    location: LocationDep,
    open_meteo: OpenMeteoServiceDep,
    airvisual: AirVisualServiceDep,
    provider: AirQualityProvider = Query(default=AirQualityProvider.OPEN_METEO),
) -> AirQualityReading:
    """
    Fetch air quality by coordinates or city.

    AirVisual only reports an index, so its pollutant values are estimates.

    Args:
        location: Coordinates (``lat``/``lon``) or ``city`` with optional
            ``state`` and ``country``
        open_meteo: Open-Meteo service
        airvisual: AirVisual service
        provider: Upstream provider to query

    Returns:
        Air quality reading

    Raises:
        ProviderError: If the provider fails or is not configured
    """
    if provider == AirQualityProvider.AIRVISUAL:
        return await airvisual.get_air_quality(location)
    return await open_meteo.get_air_quality(location)
