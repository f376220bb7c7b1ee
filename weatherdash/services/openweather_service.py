"""OpenWeatherMap current weather and 5 day / 3 hour forecast."""

from datetime import UTC, datetime

import httpx
import structlog

from weatherdash.config import settings
from weatherdash.schemas.location import Location
from weatherdash.schemas.providers import (
    OpenWeatherCurrentResponse,
    OpenWeatherForecastResponse,
)
from weatherdash.schemas.weather import CurrentConditions, WeatherResponse
from weatherdash.services.base import ProviderService
from weatherdash.services.forecast import ForecastSample, group_daily_forecast

logger = structlog.get_logger(__name__)


class OpenWeatherService(ProviderService):
    """Keyed provider accepting a city name or coordinates."""

    provider_name = "OpenWeatherMap"

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        base_url: str | None = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.api_key = settings.openweather_api_key if api_key is None else api_key
        self.base_url = (base_url or settings.openweather_base_url).rstrip("/")

    def _params(self, location: Location) -> dict[str, str | float | int]:
        params: dict[str, str | float | int] = {
            "appid": self._require_key(self.api_key, "OPENWEATHER_API_KEY"),
            "units": "metric",
        }
        if location.has_coordinates:
            params["lat"] = location.latitude  # type: ignore[assignment]
            params["lon"] = location.longitude  # type: ignore[assignment]
        else:
            params["q"] = location.city or ""
        return params

    async def get_weather(self, location: Location) -> WeatherResponse:
        """
        Fetch current weather and derive a three-day forecast.

        Two requests are made: ``/weather`` for current conditions and
        ``/forecast`` for the 3-hourly series that is grouped by day.

        Args:
            location: City name or coordinates

        Returns:
            Current conditions plus forecast

        Raises:
            ProviderError: If the key is missing or either request fails
        """
        params = self._params(location)

        current_data = await self._get_json(
            f"{self.base_url}/weather", params, OpenWeatherCurrentResponse
        )
        forecast_data = await self._get_json(
            f"{self.base_url}/forecast", params, OpenWeatherForecastResponse
        )

        condition = current_data.weather[0]
        current = CurrentConditions(
            temperature=current_data.main.temp,
            humidity=current_data.main.humidity,
            wind_speed=current_data.wind.speed,
            description=condition.description,
            icon=condition.icon,
            city=current_data.name,
            country=current_data.sys.country,
        )

        utc_offset = forecast_data.city.timezone
        samples = [
            ForecastSample(
                time=_local_time(item.dt, utc_offset),
                temperature=item.main.temp,
                cloud_cover=item.clouds.all,
                rain=item.rain.three_hours if item.rain else 0.0,
                snowfall=item.snow.three_hours if item.snow else 0.0,
            )
            for item in forecast_data.items
        ]
        today = _local_time(current_data.dt, current_data.timezone)[:10]
        forecast = group_daily_forecast(samples, today=today)

        logger.info(
            "weather_fetched",
            provider=self.provider_name,
            city=current.city,
            forecast_days=len(forecast),
        )
        return WeatherResponse(current=current, forecast=forecast)


def _local_time(timestamp: int, utc_offset: int) -> str:
    """ISO wall-clock time at the location for a unix timestamp."""
    local = datetime.fromtimestamp(timestamp + utc_offset, tz=UTC)
    return local.strftime("%Y-%m-%dT%H:%M")
