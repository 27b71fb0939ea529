"""Skycast: city weather lookup on top of the OpenWeather API."""

from skycast.client import AsyncWeatherClient, WeatherClient
from skycast.config import Settings
from skycast.exceptions import (
    ForecastDecodeError,
    ForecastTransportError,
    HistoryStoreError,
    InvalidQueryError,
    LocationNotFoundError,
    LookupTransportError,
    ProviderTransportError,
    SkycastError,
)
from skycast.history import HistoryStore
from skycast.models import Coordinates, HistoryEntry, WeatherRecord
from skycast.service import AsyncWeatherService, WeatherService

__all__ = [
    "AsyncWeatherClient",
    "AsyncWeatherService",
    "Coordinates",
    "ForecastDecodeError",
    "ForecastTransportError",
    "HistoryEntry",
    "HistoryStore",
    "HistoryStoreError",
    "InvalidQueryError",
    "LocationNotFoundError",
    "LookupTransportError",
    "ProviderTransportError",
    "SkycastError",
    "Settings",
    "WeatherClient",
    "WeatherRecord",
    "WeatherService",
]

__version__ = "0.1.0"
