"""City name -> WeatherResult orchestration."""

from __future__ import annotations

from skycast._params import require_city
from skycast.api_logging import log_service_call
from skycast.client import AsyncWeatherClient, WeatherClient
from skycast.config import Settings
from skycast.models.weather import WeatherRecord
from skycast.transform import build_weather_result


class WeatherService:
    """Geocode a city, fetch its forecast, and flatten it into records.

    Errors from either stage propagate unchanged. Nothing is persisted here;
    recording the search in history is up to the caller.
    """

    def __init__(self, client: WeatherClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> WeatherService:
        return cls(
            WeatherClient(
                base_url=settings.base_url,
                api_key=settings.api_key,
                timeout=settings.timeout,
            )
        )

    def __enter__(self) -> WeatherService:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @log_service_call
    def get_weather_for_city(self, city_name: str) -> list[WeatherRecord]:
        """Return current conditions followed by one record per forecast day."""
        city = require_city(city_name)
        coordinates = self._client.geocode(city)
        forecast = self._client.forecast(coordinates)
        return build_weather_result(forecast)


class AsyncWeatherService:
    """Coroutine version of :class:`WeatherService`."""

    def __init__(self, client: AsyncWeatherClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> AsyncWeatherService:
        return cls(
            AsyncWeatherClient(
                base_url=settings.base_url,
                api_key=settings.api_key,
                timeout=settings.timeout,
            )
        )

    async def __aenter__(self) -> AsyncWeatherService:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.close()

    @log_service_call
    async def get_weather_for_city(self, city_name: str) -> list[WeatherRecord]:
        """Return current conditions followed by one record per forecast day."""
        city = require_city(city_name)
        coordinates = await self._client.geocode(city)
        forecast = await self._client.forecast(coordinates)
        return build_weather_result(forecast)
