"""Skycast data models."""

from skycast.models.forecast import (
    ForecastCity,
    ForecastEntry,
    ForecastResponse,
    MainReadings,
    WeatherCondition,
    Wind,
)
from skycast.models.history import HistoryEntry
from skycast.models.location import Coordinates
from skycast.models.weather import WeatherRecord

__all__ = [
    "Coordinates",
    "ForecastCity",
    "ForecastEntry",
    "ForecastResponse",
    "HistoryEntry",
    "MainReadings",
    "WeatherCondition",
    "WeatherRecord",
    "Wind",
]
