"""Pure lookups mapping raw readings to display labels, icons and colors."""

# (upper bound inclusive, label, color); anything above the last bound is Hazardous
AQI_BANDS: tuple[tuple[int, str, str], ...] = (
    (50, "Good", "#00E400"),
    (100, "Moderate", "#FFFF00"),
    (150, "Unhealthy for Sensitive Groups", "#FF7E00"),
    (200, "Unhealthy", "#FF0000"),
    (300, "Very Unhealthy", "#8F3F97"),
)
HAZARDOUS = ("Hazardous", "#7E0023")

SNOW = ("Snow", "❄️")
RAIN = ("Rain", "🌧️")
OVERCAST = ("Overcast", "☁️")
PARTLY_CLOUDY = ("Partly Cloudy", "⛅")
MOSTLY_CLEAR = ("Mostly Clear", "🌤️")
CLEAR = ("Clear", "☀️")

# Linear estimation coefficients per AQI point. Particulates in µg/m³, gases in ppm.
POLLUTANT_COEFFICIENTS: dict[str, float] = {
    "pm25": 0.28,
    "pm10": 0.45,
    "o3": 0.0009,
    "no2": 0.00035,
    "so2": 0.00018,
    "co": 0.0067,
}
PARTICULATES = frozenset({"pm25", "pm10"})

# Molecular weights (g/mol) for µg/m³ -> ppm at 25 °C and 1 atm
MOLAR_VOLUME_L = 24.45
MOLECULAR_WEIGHTS: dict[str, float] = {
    "o3": 48.00,
    "no2": 46.01,
    "so2": 64.07,
    "co": 28.01,
}


def get_aqi_category(aqi: int) -> tuple[str, str]:
    """
    Map a US AQI value to its category label and display color.

    Negative values fall into the lowest band.

    Args:
        aqi: Air Quality Index

    Returns:
        Tuple of (category, hex color)
    """
    for upper, label, color in AQI_BANDS:
        if aqi <= upper:
            return label, color
    return HAZARDOUS


def get_weather_description(
    cloud_cover: float,
    rain: float,
    showers: float,
    snowfall: float,
) -> tuple[str, str]:
    """
    Infer a condition label and icon from precipitation and cloud cover.

    Snow beats rain, rain beats any cloud cover.

    Args:
        cloud_cover: Cloud cover in percent
        rain: Rain amount
        showers: Shower amount
        snowfall: Snowfall amount

    Returns:
        Tuple of (description, icon)
    """
    if snowfall > 0:
        return SNOW
    if rain > 0 or showers > 0:
        return RAIN
    if cloud_cover > 80:
        return OVERCAST
    if cloud_cover > 50:
        return PARTLY_CLOUDY
    if cloud_cover > 20:
        return MOSTLY_CLEAR
    return CLEAR


def estimate_pollutants(aqi: int) -> dict[str, float]:
    """
    Estimate pollutant concentrations for providers that only report an AQI.

    Args:
        aqi: Air Quality Index

    Returns:
        Mapping of pollutant name to estimated concentration
    """
    base = max(aqi, 0)
    return {
        name: round(coefficient * base, 2 if name in PARTICULATES else 4)
        for name, coefficient in POLLUTANT_COEFFICIENTS.items()
    }


def ugm3_to_ppm(pollutant: str, value: float | None) -> float:
    """Convert a gas concentration from µg/m³ to ppm."""
    if value is None:
        return 0.0
    return round(value * MOLAR_VOLUME_L / (MOLECULAR_WEIGHTS[pollutant] * 1000), 4)
