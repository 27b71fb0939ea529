"""Reshape a raw forecast payload into WeatherRecords.

The first slice of the series becomes the current-conditions record. Forecast
days are the slices stamped exactly at noon (``dt_txt`` ending in
``" 12:00:00"``), kept in the provider's order. A series that is not aligned
to 3-hour boundaries from midnight can yield zero or several noon slices for
a day; those are passed through as-is.
"""

from __future__ import annotations

from datetime import datetime, timezone

from skycast.exceptions import ForecastDecodeError
from skycast.models.forecast import ForecastEntry, ForecastResponse
from skycast.models.weather import WeatherRecord

NOON_SLOT_SUFFIX = " 12:00:00"
DT_TXT_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%m/%d/%Y"


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """Convert Kelvin to Fahrenheit, rounded to 2 decimal places."""
    return round((kelvin - 273.15) * 9 / 5 + 32, 2)


def format_timestamp(dt: int) -> str:
    """Format a UTC epoch timestamp as MM/DD/YYYY."""
    try:
        return datetime.fromtimestamp(dt, tz=timezone.utc).strftime(DATE_FORMAT)
    except (OverflowError, OSError, ValueError) as exc:
        raise ForecastDecodeError(f"Invalid timestamp {dt!r}: {exc}") from exc


def format_dt_txt(dt_txt: str) -> str:
    """Reformat a provider ``YYYY-MM-DD HH:MM:SS`` stamp as MM/DD/YYYY."""
    try:
        return datetime.strptime(dt_txt, DT_TXT_FORMAT).strftime(DATE_FORMAT)
    except ValueError as exc:
        raise ForecastDecodeError(f"Invalid dt_txt {dt_txt!r}: {exc}") from exc


def to_record(entry: ForecastEntry, city: str, date: str) -> WeatherRecord:
    """Map one forecast slice onto a WeatherRecord, converting the temperature."""
    condition = entry.weather[0]
    return WeatherRecord(
        city=city,
        date=date,
        icon=condition.icon,
        icon_description=condition.description,
        temp_f=kelvin_to_fahrenheit(entry.main.temp),
        humidity=entry.main.humidity,
        wind_speed=entry.wind.speed,
    )


def parse_current_weather(response: ForecastResponse) -> WeatherRecord:
    """Build the current-conditions record from the first slice."""
    first = response.entries[0]
    return to_record(first, response.city.name, format_timestamp(first.dt))


def select_forecast_days(entries: list[ForecastEntry]) -> list[ForecastEntry]:
    """Return the noon slices, in their original order."""
    return [entry for entry in entries if entry.dt_txt.endswith(NOON_SLOT_SUFFIX)]


def build_forecast(current: WeatherRecord, entries: list[ForecastEntry]) -> list[WeatherRecord]:
    """Map the noon slices to records, reusing the city from ``current``."""
    return [
        to_record(entry, current.city, format_dt_txt(entry.dt_txt))
        for entry in select_forecast_days(entries)
    ]


def build_weather_result(response: ForecastResponse) -> list[WeatherRecord]:
    """Current conditions followed by one record per forecast day."""
    current = parse_current_weather(response)
    return [current, *build_forecast(current, response.entries)]
