"""Daily aggregation of hourly / 3-hourly forecast series."""

from collections.abc import Iterable
from dataclasses import dataclass

from weatherdash.schemas.weather import ForecastEntry
from weatherdash.services.categorizer import get_weather_description

DAY_LABELS = ("Tomorrow", "Day After", "3 Days")
MAX_FORECAST_DAYS = len(DAY_LABELS)


@dataclass(frozen=True)
class ForecastSample:
    """One time step of a provider series, reduced to the fields we aggregate."""

    time: str
    temperature: float | None
    cloud_cover: float = 0.0
    rain: float = 0.0
    showers: float = 0.0
    snowfall: float = 0.0

    @property
    def date(self) -> str:
        """Date portion of ``2025-09-17T00:00`` or ``2025-09-17 00:00:00``."""
        return self.time.replace("T", " ").split(" ", 1)[0]


def group_daily_forecast(
    samples: Iterable[ForecastSample],
    today: str | None = None,
) -> list[ForecastEntry]:
    """
    Collapse a time series into at most three daily forecast entries.

    The current day is skipped. Dates are taken in series order, not
    calendar order.

    Args:
        samples: Provider samples in upstream order
        today: Local ``YYYY-MM-DD`` of the current day; defaults to the
            first sample's date

    Returns:
        Forecast entries labelled Tomorrow, Day After, 3 Days
    """
    series = list(samples)
    if not series:
        return []

    by_date: dict[str, list[ForecastSample]] = {}
    for sample in series:
        by_date.setdefault(sample.date, []).append(sample)

    today = today or series[0].date
    upcoming = [date for date in by_date if date != today][:MAX_FORECAST_DAYS]

    forecast = []
    for label, date in zip(DAY_LABELS, upcoming):
        entry = _aggregate_day(label, by_date[date])
        if entry is not None:
            forecast.append(entry)
    return forecast


def _aggregate_day(label: str, day: list[ForecastSample]) -> ForecastEntry | None:
    temperatures = [s.temperature for s in day if s.temperature is not None]
    if not temperatures:
        return None

    avg_cloud_cover = sum(s.cloud_cover for s in day) / len(day)
    description, icon = get_weather_description(
        avg_cloud_cover,
        sum(s.rain for s in day),
        sum(s.showers for s in day),
        sum(s.snowfall for s in day),
    )
    return ForecastEntry(
        date=label,
        temperature_max=max(temperatures),
        temperature_min=min(temperatures),
        description=description,
        icon=icon,
    )
