"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import ACCENT_COLOR, PLOTLY_LAYOUT_DEFAULTS
from .formatters import (
    format_humidity,
    format_temperature,
    format_wind,
    icon_url,
    temperature_series,
)

__all__ = [
    "ACCENT_COLOR",
    "PLOTLY_LAYOUT_DEFAULTS",
    "format_humidity",
    "format_temperature",
    "format_wind",
    "icon_url",
    "temperature_series",
]
