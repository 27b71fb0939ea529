"""Shared test fixtures and sample API responses."""

from __future__ import annotations

from typing import Any

import pytest

from skycast.api_logging import set_log_dir

BASE_URL = "https://api.openweathermap.org"
GEOCODE_URL = f"{BASE_URL}/geo/1.0/direct"
FORECAST_URL = f"{BASE_URL}/data/2.5/forecast"
API_KEY = "test-key"

# 2024-01-01 00:00:00 UTC
DAY_START = 1704067200
THREE_HOURS = 3 * 60 * 60


SAMPLE_GEOCODE = [
    {
        "name": "Boston",
        "local_names": {"en": "Boston"},
        "lat": 42.36,
        "lon": -71.06,
        "country": "US",
        "state": "Massachusetts",
    }
]


def make_entry(
    dt: int,
    dt_txt: str,
    temp: float = 273.15,
    humidity: int = 80,
    wind_speed: float = 3.5,
    icon: str = "01d",
    description: str = "clear sky",
) -> dict[str, Any]:
    return {
        "dt": dt,
        "dt_txt": dt_txt,
        "weather": [{"id": 800, "main": "Clear", "icon": icon, "description": description}],
        "main": {"temp": temp, "feels_like": temp - 2, "humidity": humidity, "pressure": 1012},
        "wind": {"speed": wind_speed, "deg": 270},
        "visibility": 10000,
    }


def make_forecast(entries: list[dict[str, Any]], city: str = "Boston") -> dict[str, Any]:
    return {
        "cod": "200",
        "cnt": len(entries),
        "city": {"id": 4930956, "name": city, "country": "US"},
        "list": entries,
    }


def one_day_series() -> list[dict[str, Any]]:
    """Eight 3-hour slices covering 2024-01-01, one of them at noon."""
    return [
        make_entry(
            DAY_START + i * THREE_HOURS,
            f"2024-01-01 {i * 3:02d}:00:00",
            temp=270.0 + i,
        )
        for i in range(8)
    ]


SAMPLE_FORECAST = make_forecast(
    [make_entry(DAY_START + 12 * 60 * 60, "2024-01-01 12:00:00", temp=273.15)]
)


@pytest.fixture(autouse=True)
def _api_log_dir(tmp_path):
    """Send API call logs to a per-test directory."""
    set_log_dir(str(tmp_path / "logs"))
    yield tmp_path / "logs"
    set_log_dir(str(tmp_path / "logs-closed"))
