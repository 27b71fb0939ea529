"""Formatting helpers for the weather dashboard."""

from __future__ import annotations

from skycast.models.weather import WeatherRecord

from .constants import ICON_URL_TEMPLATE


def format_temperature(temp_f: float | None) -> str:
    """Format Fahrenheit as '72.46 °F' or an em dash placeholder if None."""
    if temp_f is None:
        return "—"
    return f"{temp_f:.2f} °F"


def format_wind(speed: float | None) -> str:
    if speed is None:
        return "—"
    return f"{speed:.2f} MPH"


def format_humidity(humidity: int | None) -> str:
    if humidity is None:
        return "—"
    return f"{humidity} %"


def icon_url(icon: str) -> str:
    """Return the provider's image URL for a condition icon code."""
    return ICON_URL_TEMPLATE.format(icon=icon)


def temperature_series(records: list[WeatherRecord]) -> tuple[list[str], list[float]]:
    """Split forecast records into (dates, Fahrenheit temperatures) for charting.

    The first record is current conditions and is left out.
    """
    forecast = records[1:]
    return [r.date for r in forecast], [r.temp_f for r in forecast]
