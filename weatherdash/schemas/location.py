"""Location input shared by every weather and air quality command."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Location(BaseModel):
    """Either a coordinate pair or a city name, never both."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    city: str | None = Field(default=None, min_length=1, max_length=120)
    state: str | None = Field(default=None, description="Optional state, used by AirVisual")
    country: str | None = Field(default=None, description="Optional country, used by AirVisual")

    @model_validator(mode="after")
    def validate_single_location(self) -> "Location":
        """Require exactly one of (latitude, longitude) or city."""
        has_lat = self.latitude is not None
        has_lon = self.longitude is not None
        if has_lat != has_lon:
            raise ValueError("latitude and longitude must be provided together")
        if has_lat and self.city:
            raise ValueError("provide either coordinates or a city, not both")
        if not has_lat and not self.city:
            raise ValueError("provide either coordinates or a city")
        return self

    @property
    def has_coordinates(self) -> bool:
        """Check if the location is a coordinate pair."""
        return self.latitude is not None and self.longitude is not None

    @property
    def coordinate_label(self) -> str:
        """Display label for a coordinate pair, e.g. ``52.52°N, 13.41°E``."""
        return f"{self.latitude:.2f}°N, {self.longitude:.2f}°E"
