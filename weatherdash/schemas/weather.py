"""Unified weather and air quality schemas returned to the dashboard."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WeatherProvider(str, Enum):
    """Upstream sources for current weather and forecast."""

    OPEN_METEO = "open-meteo"
    OPENWEATHERMAP = "openweathermap"


class AirQualityProvider(str, Enum):
    """Upstream sources for air quality readings."""

    OPEN_METEO = "open-meteo"
    AIRVISUAL = "airvisual"


class CurrentConditions(BaseModel):
    """Current weather at the requested location."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(..., description="Temperature in Celsius")
    humidity: int = Field(..., description="Relative humidity in percent")
    wind_speed: float = Field(..., description="Wind speed as reported by the provider")
    description: str = Field(..., description="Human-readable condition label")
    icon: str = Field(..., description="Icon glyph or provider icon code")
    city: str = Field(..., description="Location label")
    country: str = Field(..., description="Region, country or timezone label")


class ForecastEntry(BaseModel):
    """One aggregated day of the short forecast."""

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Relative day label, e.g. Tomorrow")
    temperature_max: float = Field(..., description="Daily maximum in Celsius")
    temperature_min: float = Field(..., description="Daily minimum in Celsius")
    description: str
    icon: str


class WeatherResponse(BaseModel):
    """Current conditions paired with up to three forecast days."""

    model_config = ConfigDict(frozen=True)

    current: CurrentConditions
    forecast: list[ForecastEntry] = Field(default_factory=list, max_length=3)


class AirQualityReading(BaseModel):
    """Air quality index with its category and pollutant concentrations.

    Particulates (pm25, pm10) are in µg/m³, gases (o3, no2, so2, co) in ppm.
    """

    model_config = ConfigDict(frozen=True)

    aqi: int = Field(..., description="US Air Quality Index")
    category: str = Field(..., description="Health category (e.g., Good, Moderate)")
    color: str = Field(..., description="Display color for the category")
    pm25: float
    pm10: float
    o3: float
    no2: float
    so2: float
    co: float
