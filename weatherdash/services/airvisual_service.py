"""AirVisual (IQAir) air quality."""

import httpx
import structlog

from weatherdash.config import settings
from weatherdash.core.exceptions import ProviderError
from weatherdash.schemas.location import Location
from weatherdash.schemas.providers import AirVisualResponse
from weatherdash.schemas.weather import AirQualityReading
from weatherdash.services.base import ProviderService
from weatherdash.services.categorizer import estimate_pollutants, get_aqi_category

logger = structlog.get_logger(__name__)


class AirVisualService(ProviderService):
    """Keyed provider reporting only an AQI; pollutants are estimated from it."""

    provider_name = "AirVisual"

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        base_url: str | None = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.api_key = settings.airvisual_api_key if api_key is None else api_key
        self.base_url = (base_url or settings.airvisual_base_url).rstrip("/")

    async def get_air_quality(self, location: Location) -> AirQualityReading:
        """
        Fetch the US AQI for a city, or for the station nearest to coordinates.

        Args:
            location: City (with optional state and country) or coordinates

        Returns:
            Air quality reading with estimated pollutant concentrations

        Raises:
            ProviderError: If the key is missing, the request fails or the
                provider reports a failure status
        """
        key = self._require_key(self.api_key, "AIRVISUAL_API_KEY")

        if location.has_coordinates:
            url = f"{self.base_url}/nearest_city"
            params: dict[str, str | float | int] = {
                "lat": location.latitude,  # type: ignore[dict-item]
                "lon": location.longitude,  # type: ignore[dict-item]
                "key": key,
            }
        else:
            url = f"{self.base_url}/city"
            params = {
                "city": location.city or "",
                "state": location.state or "",
                "country": location.country or "",
                "key": key,
            }

        data = await self._get_json(url, params, AirVisualResponse, subject="air quality")
        if data.status != "success":
            raise ProviderError(f"Air quality API error: {data.status}")

        aqi = data.data.current.pollution.aqius
        category, color = get_aqi_category(aqi)

        logger.info(
            "air_quality_fetched",
            provider=self.provider_name,
            city=data.data.city,
            aqi=aqi,
        )
        return AirQualityReading(aqi=aqi, category=category, color=color, **estimate_pollutants(aqi))
