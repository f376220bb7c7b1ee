"""Canned demo data for running the dashboard without API keys."""

from weatherdash.schemas.location import Location
from weatherdash.schemas.weather import (
    AirQualityReading,
    CurrentConditions,
    ForecastEntry,
    WeatherResponse,
)
from weatherdash.services.categorizer import get_aqi_category

MOCK_AQI = 45

# The city variant once carried OpenWeatherMap icon codes; both variants use emoji now
MOCK_FORECAST = (
    ForecastEntry(
        date="Tomorrow",
        temperature_max=25.0,
        temperature_min=18.0,
        description="Sunny",
        icon="☀️",
    ),
    ForecastEntry(
        date="Day After",
        temperature_max=23.0,
        temperature_min=16.0,
        description="Partly cloudy",
        icon="⛅",
    ),
    ForecastEntry(
        date="3 Days",
        temperature_max=20.0,
        temperature_min=14.0,
        description="Light rain",
        icon="🌧️",
    ),
)


class MockService:
    """Returns fixed literals; performs no I/O."""

    @staticmethod
    def get_weather(location: Location) -> WeatherResponse:
        """Return demo weather labelled with the requested location."""
        if location.has_coordinates:
            city, country = location.coordinate_label, "GMT"
        else:
            city, country = location.city or "", "US"

        current = CurrentConditions(
            temperature=22.5,
            humidity=65,
            wind_speed=3.2,
            description="Partly cloudy",
            icon="⛅",
            city=city,
            country=country,
        )
        return WeatherResponse(current=current, forecast=list(MOCK_FORECAST))

    @staticmethod
    def get_air_quality(location: Location) -> AirQualityReading:
        """Return demo air quality; the location is ignored."""
        category, color = get_aqi_category(MOCK_AQI)
        return AirQualityReading(
            aqi=MOCK_AQI,
            category=category,
            color=color,
            pm25=12.5,
            pm10=20.0,
            o3=0.04,
            no2=0.015,
            so2=0.008,
            co=0.3,
        )
