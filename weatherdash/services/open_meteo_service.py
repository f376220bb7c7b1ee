"""Open-Meteo weather, air quality and geocoding."""

import httpx
import structlog

from weatherdash.config import settings
from weatherdash.core.exceptions import ProviderError
from weatherdash.schemas.location import Location
from weatherdash.schemas.providers import (
    GeocodingResponse,
    GeocodingResult,
    OpenMeteoAirQualityResponse,
    OpenMeteoForecastResponse,
)
from weatherdash.schemas.weather import (
    AirQualityReading,
    CurrentConditions,
    WeatherResponse,
)
from weatherdash.services.base import ProviderService
from weatherdash.services.categorizer import (
    get_aqi_category,
    get_weather_description,
    ugm3_to_ppm,
)
from weatherdash.services.forecast import ForecastSample, group_daily_forecast

logger = structlog.get_logger(__name__)

WEATHER_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "wind_speed_10m",
    "rain",
    "showers",
    "snowfall",
    "cloud_cover",
]

AIR_QUALITY_VARIABLES = [
    "us_aqi",
    "pm2_5",
    "pm10",
    "ozone",
    "nitrogen_dioxide",
    "sulphur_dioxide",
    "carbon_monoxide",
]


class OpenMeteoService(ProviderService):
    """Keyless provider working on coordinates; city names are geocoded first."""

    provider_name = "Open-Meteo"

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        forecast_url: str | None = None,
        air_quality_url: str | None = None,
        geocoding_url: str | None = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.forecast_url = forecast_url or settings.open_meteo_base_url
        self.air_quality_url = air_quality_url or settings.open_meteo_air_quality_url
        self.geocoding_url = geocoding_url or settings.open_meteo_geocoding_url

    async def geocode(self, city: str) -> GeocodingResult:
        """
        Resolve a city name to its best-matching coordinates.

        Args:
            city: City name as typed by the user

        Returns:
            First geocoding match

        Raises:
            ProviderError: If the lookup fails or nothing matches
        """
        payload = await self._get_json(
            self.geocoding_url,
            {"name": city, "count": 1, "language": "en", "format": "json"},
            GeocodingResponse,
            subject="geocoding",
        )
        if not payload.results:
            raise ProviderError(f"Could not find location: {city}")

        match = payload.results[0]
        logger.info(
            "location_geocoded",
            city=city,
            name=match.name,
            latitude=match.latitude,
            longitude=match.longitude,
        )
        return match

    async def _resolve(self, location: Location) -> tuple[float, float, GeocodingResult | None]:
        if location.has_coordinates:
            return location.latitude, location.longitude, None  # type: ignore[return-value]
        match = await self.geocode(location.city or "")
        return match.latitude, match.longitude, match

    async def get_weather(self, location: Location) -> WeatherResponse:
        """
        Fetch current conditions and a three-day forecast.

        Args:
            location: Coordinates or city name

        Returns:
            Current conditions plus forecast

        Raises:
            ProviderError: If Open-Meteo cannot be reached or returns bad data
        """
        latitude, longitude, match = await self._resolve(location)

        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(WEATHER_VARIABLES),
            "hourly": ",".join(WEATHER_VARIABLES),
            "timezone": "auto",
        }
        data = await self._get_json(self.forecast_url, params, OpenMeteoForecastResponse)

        samples = _hourly_samples(data)
        if not samples:
            raise ProviderError("Failed to parse weather data: empty hourly series")

        if match is not None:
            city, country = match.name, match.country
        else:
            city, country = location.coordinate_label, data.timezone

        current = _current_conditions(data, samples[0], city=city, country=country)
        forecast = group_daily_forecast(samples)

        logger.info(
            "weather_fetched",
            provider=self.provider_name,
            city=city,
            forecast_days=len(forecast),
        )
        return WeatherResponse(current=current, forecast=forecast)

    async def get_air_quality(self, location: Location) -> AirQualityReading:
        """
        Fetch the current US AQI and measured pollutant concentrations.

        Args:
            location: Coordinates or city name

        Returns:
            Air quality reading with gases converted to ppm

        Raises:
            ProviderError: If Open-Meteo cannot be reached or returns bad data
        """
        latitude, longitude, _ = await self._resolve(location)

        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(AIR_QUALITY_VARIABLES),
            "timezone": "auto",
        }
        data = await self._get_json(
            self.air_quality_url,
            params,
            OpenMeteoAirQualityResponse,
            subject="air quality",
        )

        current = data.current
        if current.us_aqi is None:
            raise ProviderError("Failed to parse air quality data: no AQI reported")

        aqi = round(current.us_aqi)
        category, color = get_aqi_category(aqi)

        logger.info("air_quality_fetched", provider=self.provider_name, aqi=aqi)
        return AirQualityReading(
            aqi=aqi,
            category=category,
            color=color,
            pm25=round(current.pm2_5 or 0.0, 2),
            pm10=round(current.pm10 or 0.0, 2),
            o3=ugm3_to_ppm("o3", current.ozone),
            no2=ugm3_to_ppm("no2", current.nitrogen_dioxide),
            so2=ugm3_to_ppm("so2", current.sulphur_dioxide),
            co=ugm3_to_ppm("co", current.carbon_monoxide),
        )


def _hourly_samples(data: OpenMeteoForecastResponse) -> list[ForecastSample]:
    hourly = data.hourly
    return [
        ForecastSample(
            time=time,
            temperature=hourly.temperature_2m[i] if i < len(hourly.temperature_2m) else None,
            cloud_cover=_value_at(hourly.cloud_cover, i),
            rain=_value_at(hourly.rain, i),
            showers=_value_at(hourly.showers, i),
            snowfall=_value_at(hourly.snowfall, i),
        )
        for i, time in enumerate(hourly.time)
    ]


def _value_at(values: list[float | None], index: int) -> float:
    if index < len(values):
        return values[index] or 0.0
    return 0.0


def _current_conditions(
    data: OpenMeteoForecastResponse,
    first: ForecastSample,
    city: str,
    country: str,
) -> CurrentConditions:
    # Prefer the live "current" block; fall back to the first hourly step
    if data.current is not None:
        now = data.current
        description, icon = get_weather_description(
            now.cloud_cover or 0.0,
            now.rain or 0.0,
            now.showers or 0.0,
            now.snowfall or 0.0,
        )
        return CurrentConditions(
            temperature=now.temperature_2m,
            humidity=int(now.relative_humidity_2m),
            wind_speed=now.wind_speed_10m,
            description=description,
            icon=icon,
            city=city,
            country=country,
        )

    if first.temperature is None:
        raise ProviderError("Failed to parse weather data: no current temperature")

    hourly = data.hourly
    description, icon = get_weather_description(
        first.cloud_cover, first.rain, first.showers, first.snowfall
    )
    return CurrentConditions(
        temperature=first.temperature,
        humidity=int(_value_at(hourly.relative_humidity_2m, 0)),
        wind_speed=_value_at(hourly.wind_speed_10m, 0),
        description=description,
        icon=icon,
        city=city,
        country=country,
    )
