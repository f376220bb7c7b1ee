"""Validation models for upstream provider payloads.

Only the fields the normalizers read are declared; everything else in the
provider JSON is ignored.
"""

from pydantic import BaseModel, Field

# ============================================================================
# Open-Meteo
# ============================================================================


class OpenMeteoCurrent(BaseModel):
    """Open-Meteo ``current`` block."""

    temperature_2m: float
    relative_humidity_2m: float
    wind_speed_10m: float
    rain: float | None = 0.0
    showers: float | None = 0.0
    snowfall: float | None = 0.0
    cloud_cover: float | None = 0.0


class OpenMeteoHourly(BaseModel):
    """Open-Meteo ``hourly`` arrays, one value per timestamp."""

    time: list[str]
    temperature_2m: list[float | None]
    relative_humidity_2m: list[float | None]
    wind_speed_10m: list[float | None]
    rain: list[float | None]
    showers: list[float | None]
    snowfall: list[float | None]
    cloud_cover: list[float | None]


class OpenMeteoForecastResponse(BaseModel):
    """Open-Meteo forecast API response."""

    timezone: str = "GMT"
    current: OpenMeteoCurrent | None = None
    hourly: OpenMeteoHourly


class OpenMeteoAirQualityCurrent(BaseModel):
    """Open-Meteo air quality ``current`` block (µg/m³)."""

    us_aqi: float | None = None
    pm2_5: float | None = None
    pm10: float | None = None
    ozone: float | None = None
    nitrogen_dioxide: float | None = None
    sulphur_dioxide: float | None = None
    carbon_monoxide: float | None = None


class OpenMeteoAirQualityResponse(BaseModel):
    """Open-Meteo air quality API response."""

    current: OpenMeteoAirQualityCurrent


class GeocodingResult(BaseModel):
    """One match from the Open-Meteo geocoding API."""

    name: str
    latitude: float
    longitude: float
    country: str = ""


class GeocodingResponse(BaseModel):
    """Open-Meteo geocoding API response; ``results`` is absent on no match."""

    results: list[GeocodingResult] = Field(default_factory=list)


# ============================================================================
# OpenWeatherMap
# ============================================================================


class OpenWeatherMain(BaseModel):
    """Temperature block shared by current and forecast payloads."""

    temp: float
    humidity: int = 0


class OpenWeatherCondition(BaseModel):
    """Entry of the ``weather`` list."""

    description: str
    icon: str


class OpenWeatherWind(BaseModel):
    """Wind block."""

    speed: float


class OpenWeatherSys(BaseModel):
    """System block carrying the country code."""

    country: str = ""


class OpenWeatherCurrentResponse(BaseModel):
    """OpenWeatherMap ``/weather`` response."""

    main: OpenWeatherMain
    weather: list[OpenWeatherCondition] = Field(..., min_length=1)
    wind: OpenWeatherWind
    name: str
    sys: OpenWeatherSys = Field(default_factory=OpenWeatherSys)
    dt: int = Field(..., description="Observation time, unix seconds UTC")
    timezone: int = Field(default=0, description="Shift from UTC in seconds")


class OpenWeatherClouds(BaseModel):
    """Cloud cover percentage."""

    all: float = 0.0


class OpenWeatherPrecipitation(BaseModel):
    """Rain or snow volume over the last three hours."""

    three_hours: float = Field(default=0.0, alias="3h")


class OpenWeatherForecastItem(BaseModel):
    """One 3-hour step of the ``/forecast`` list."""

    dt: int = Field(..., description="Slot start, unix seconds UTC")
    main: OpenWeatherMain
    clouds: OpenWeatherClouds = Field(default_factory=OpenWeatherClouds)
    rain: OpenWeatherPrecipitation | None = None
    snow: OpenWeatherPrecipitation | None = None


class OpenWeatherCity(BaseModel):
    """City block of the forecast payload."""

    timezone: int = Field(default=0, description="Shift from UTC in seconds")


class OpenWeatherForecastResponse(BaseModel):
    """OpenWeatherMap ``/forecast`` (5 day / 3 hour) response."""

    items: list[OpenWeatherForecastItem] = Field(..., alias="list")
    city: OpenWeatherCity = Field(default_factory=OpenWeatherCity)


# ============================================================================
# AirVisual
# ============================================================================


class AirVisualPollution(BaseModel):
    """Pollution block; ``aqius`` is the US AQI."""

    aqius: int


class AirVisualCurrent(BaseModel):
    """Current block."""

    pollution: AirVisualPollution


class AirVisualData(BaseModel):
    """City data block."""

    city: str = ""
    current: AirVisualCurrent


class AirVisualResponse(BaseModel):
    """AirVisual ``/city`` and ``/nearest_city`` response."""

    status: str
    data: AirVisualData
