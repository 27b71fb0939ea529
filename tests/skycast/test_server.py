"""Tests for the FastAPI routes."""

from __future__ import annotations

import inspect
import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from skycast import HistoryStore, Settings, WeatherRecord
from skycast.exceptions import ForecastTransportError, LocationNotFoundError
from skycast.server import create_app

RECORDS = [
    WeatherRecord(
        city="Boston",
        date="01/01/2024",
        icon="01d",
        icon_description="clear sky",
        temp_f=32.0,
        humidity=80,
        wind_speed=3.5,
    ),
    WeatherRecord(
        city="Boston",
        date="01/02/2024",
        icon="10d",
        icon_description="light rain",
        temp_f=40.5,
        humidity=90,
        wind_speed=5.1,
    ),
]


class StubWeatherService:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[str] = []

    async def get_weather_for_city(self, city_name: str) -> list[WeatherRecord]:
        self.calls.append(city_name)
        if self.error is not None:
            raise self.error
        return RECORDS

    async def close(self) -> None:
        pass


def build_client(
    tmp_path: Path, service: StubWeatherService | None = None
) -> tuple[TestClient, HistoryStore, StubWeatherService]:
    service = service or StubWeatherService()
    history = HistoryStore(tmp_path / "searchHistory.json")
    settings = Settings(history_path=str(history.path), log_dir=str(tmp_path / "logs"))
    app = create_app(service=service, history=history, settings=settings)  # type: ignore[arg-type]
    return TestClient(app), history, service


def test_health(tmp_path: Path) -> None:
    client, _, _ = build_client(tmp_path)
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_post_weather_returns_records(tmp_path: Path) -> None:
    client, _, service = build_client(tmp_path)
    response = client.post("/api/weather", json={"cityName": "Boston"})
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 2
    assert body[0] == {
        "city": "Boston",
        "date": "01/01/2024",
        "icon": "01d",
        "iconDescription": "clear sky",
        "tempF": 32.0,
        "humidity": 80,
        "windSpeed": 3.5,
    }
    assert service.calls == ["Boston"]


def test_post_weather_records_history(tmp_path: Path) -> None:
    client, history, _ = build_client(tmp_path)
    client.post("/api/weather", json={"cityName": "Boston"})
    assert [e.name for e in history.list_cities()] == ["Boston"]


@pytest.mark.parametrize("payload", [{}, {"cityName": ""}, {"cityName": "  "}])
def test_post_weather_requires_city(tmp_path: Path, payload: dict) -> None:
    client, history, service = build_client(tmp_path)
    response = client.post("/api/weather", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "City name is required"}
    assert service.calls == []
    assert history.list_cities() == []


@pytest.mark.parametrize(
    "error",
    [ForecastTransportError("Internal Server Error", status_code=500), LocationNotFoundError("Atlantis")],
)
def test_post_weather_failure_skips_history(tmp_path: Path, error: Exception) -> None:
    client, history, _ = build_client(tmp_path, StubWeatherService(error=error))
    response = client.post("/api/weather", json={"cityName": "Boston"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch weather data"}
    assert history.list_cities() == []


def test_get_history(tmp_path: Path) -> None:
    client, history, _ = build_client(tmp_path)
    boston = history.add_city("Boston")
    denver = history.add_city("Denver")
    response = client.get("/api/weather/history")
    assert response.status_code == 200
    assert response.json() == [
        {"id": boston.id, "name": "Boston"},
        {"id": denver.id, "name": "Denver"},
    ]


def test_get_history_malformed_file(tmp_path: Path) -> None:
    client, history, _ = build_client(tmp_path)
    history.path.write_text("not json", encoding="utf-8")
    response = client.get("/api/weather/history")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch search history"}


def test_delete_history_entry(tmp_path: Path) -> None:
    client, history, _ = build_client(tmp_path)
    boston = history.add_city("Boston")
    response = client.delete(f"/api/weather/history/{boston.id}")
    assert response.status_code == 200
    assert response.json() == {"deletedCity": {"id": boston.id, "name": "Boston"}}
    assert history.list_cities() == []


def test_delete_unknown_entry(tmp_path: Path) -> None:
    client, _, _ = build_client(tmp_path)
    response = client.delete("/api/weather/history/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "City not found in search history"}


def test_delete_malformed_file(tmp_path: Path) -> None:
    client, history, _ = build_client(tmp_path)
    history.path.write_text("not json", encoding="utf-8")
    response = client.delete("/api/weather/history/abc")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete city from search history"}


def test_post_weather_without_body(tmp_path: Path) -> None:
    client, _, service = build_client(tmp_path)
    response = client.post("/api/weather")
    assert response.status_code == 400
    assert response.json() == {"error": "City name is required"}
    assert service.calls == []


@pytest.fixture
def failing_replace(monkeypatch):
    def _fail(src, dst):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(os, "replace", _fail)


def test_post_weather_history_write_failure(tmp_path: Path, failing_replace) -> None:
    client, _, service = build_client(tmp_path)
    response = client.post("/api/weather", json={"cityName": "Boston"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch weather data"}
    assert service.calls == ["Boston"]


def test_delete_history_write_failure(tmp_path: Path, monkeypatch) -> None:
    client, history, _ = build_client(tmp_path)
    boston = history.add_city("Boston")

    def _fail(src, dst):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(os, "replace", _fail)
    response = client.delete(f"/api/weather/history/{boston.id}")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete city from search history"}


def test_history_routes_run_in_threadpool(tmp_path: Path) -> None:
    client, _, _ = build_client(tmp_path)
    endpoints = {
        (route.path, tuple(sorted(route.methods))): route.endpoint
        for route in client.app.routes
        if hasattr(route, "methods")
    }
    assert not inspect.iscoroutinefunction(endpoints[("/api/weather/history", ("GET",))])
    assert not inspect.iscoroutinefunction(
        endpoints[("/api/weather/history/{entry_id}", ("DELETE",))]
    )
