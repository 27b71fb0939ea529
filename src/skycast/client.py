"""Public client classes for the OpenWeather geocoding and forecast endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from skycast._http import DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from skycast._params import build_query_params, require_city
from skycast.api_logging import log_api_call
from skycast.exceptions import (
    ForecastDecodeError,
    ForecastTransportError,
    LocationNotFoundError,
    LookupTransportError,
)
from skycast.models.forecast import ForecastResponse
from skycast.models.location import Coordinates

DEFAULT_BASE_URL = "https://api.openweathermap.org"
GEOCODE_ENDPOINT = "/geo/1.0/direct"
FORECAST_ENDPOINT = "/data/2.5/forecast"

_coordinates_adapter = TypeAdapter(list[Coordinates])


def _first_location(city: str, data: Any) -> Coordinates:
    """Validate a geocoding payload and return its first match."""
    try:
        matches = _coordinates_adapter.validate_python(data)
    except ValidationError as exc:
        raise LookupTransportError(f"Unexpected geocoding response: {exc}") from exc
    if not matches:
        raise LocationNotFoundError(city)
    return matches[0]


def _parse_forecast(data: Any) -> ForecastResponse:
    try:
        return ForecastResponse.model_validate(data)
    except ValidationError as exc:
        raise ForecastDecodeError(f"Failed to validate forecast response: {exc}") from exc


def _geocode_params(city: str, api_key: str) -> list[tuple[str, str]]:
    return build_query_params(q=city, limit=1, appid=api_key)


def _forecast_params(coordinates: Coordinates, api_key: str) -> list[tuple[str, str]]:
    return build_query_params(lat=coordinates.latitude, lon=coordinates.longitude, appid=api_key)


class WeatherClient:
    """Synchronous client for the OpenWeather API.

    Usage:
        with WeatherClient(api_key="...") as client:
            coordinates = client.geocode("Boston")
            forecast = client.forecast(coordinates)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    @log_api_call
    def geocode(self, city: str) -> Coordinates:
        """Resolve a city name to the coordinates of its first match."""
        city = require_city(city)
        data = self._transport.get(
            GEOCODE_ENDPOINT,
            _geocode_params(city, self._api_key),
            error=LookupTransportError,
            decode_error=LookupTransportError,
        )
        return _first_location(city, data)

    @log_api_call
    def forecast(self, coordinates: Coordinates) -> ForecastResponse:
        """Get the 5 day / 3 hour forecast series for ``coordinates``."""
        data = self._transport.get(
            FORECAST_ENDPOINT,
            _forecast_params(coordinates, self._api_key),
            error=ForecastTransportError,
            decode_error=ForecastDecodeError,
        )
        return _parse_forecast(data)


class AsyncWeatherClient:
    """Asynchronous client for the OpenWeather API.

    Usage:
        async with AsyncWeatherClient(api_key="...") as client:
            coordinates = await client.geocode("Boston")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    @log_api_call
    async def geocode(self, city: str) -> Coordinates:
        """Resolve a city name to the coordinates of its first match."""
        city = require_city(city)
        data = await self._transport.get(
            GEOCODE_ENDPOINT,
            _geocode_params(city, self._api_key),
            error=LookupTransportError,
            decode_error=LookupTransportError,
        )
        return _first_location(city, data)

    @log_api_call
    async def forecast(self, coordinates: Coordinates) -> ForecastResponse:
        """Get the 5 day / 3 hour forecast series for ``coordinates``."""
        data = await self._transport.get(
            FORECAST_ENDPOINT,
            _forecast_params(coordinates, self._api_key),
            error=ForecastTransportError,
            decode_error=ForecastDecodeError,
        )
        return _parse_forecast(data)
