"""Application configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_KEY_PREFIX = "YOUR_"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    # Application
    app_name: str = Field(default="Weather Dashboard API", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    api_v1_prefix: str = Field(default="/api/v1", alias="API_V1_PREFIX")

    # Server
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    reload: bool = Field(default=False, alias="RELOAD")

    # Provider API keys
    openweather_api_key: str = Field(default="", alias="OPENWEATHER_API_KEY")
    airvisual_api_key: str = Field(default="", alias="AIRVISUAL_API_KEY")

    # Provider endpoints
    open_meteo_base_url: str = Field(
        default="https://api.open-meteo.com/v1/forecast",
        alias="OPEN_METEO_BASE_URL",
    )
    open_meteo_air_quality_url: str = Field(
        default="https://air-quality-api.open-meteo.com/v1/air-quality",
        alias="OPEN_METEO_AIR_QUALITY_URL",
    )
    open_meteo_geocoding_url: str = Field(
        default="https://geocoding-api.open-meteo.com/v1/search",
        alias="OPEN_METEO_GEOCODING_URL",
    )
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5",
        alias="OPENWEATHER_BASE_URL",
    )
    airvisual_base_url: str = Field(
        default="https://api.airvisual.com/v2",
        alias="AIRVISUAL_BASE_URL",
    )

    # Outbound HTTP timeout in seconds
    http_timeout: float = Field(default=10.0, alias="HTTP_TIMEOUT")

    # CORS
    cors_origins_str: str = Field(
        default="http://localhost:1420,tauri://localhost",
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")

    @property
    def cors_origins(self) -> list[str]:
        """Get CORS origins as a list."""
        if isinstance(self.cors_origins_str, str):
            return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]
        return [self.cors_origins_str]

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    @property
    def has_openweather_key(self) -> bool:
        """Check if a usable OpenWeatherMap key is configured."""
        return is_configured_key(self.openweather_api_key)

    @property
    def has_airvisual_key(self) -> bool:
        """Check if a usable AirVisual key is configured."""
        return is_configured_key(self.airvisual_api_key)


def is_configured_key(api_key: str | None) -> bool:
    """Return False for empty keys and unreplaced ``YOUR_...`` placeholders."""
    if not api_key or not api_key.strip():
        return False
    return not api_key.strip().upper().startswith(PLACEHOLDER_KEY_PREFIX)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
