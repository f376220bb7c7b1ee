"""Request and response schemas."""

from weatherdash.schemas.location import Location
from weatherdash.schemas.weather import (
    AirQualityProvider,
    AirQualityReading,
    CurrentConditions,
    ForecastEntry,
    WeatherProvider,
    WeatherResponse,
)

__all__ = [
    "AirQualityProvider",
    "AirQualityReading",
    "CurrentConditions",
    "ForecastEntry",
    "Location",
    "WeatherProvider",
    "WeatherResponse",
]
