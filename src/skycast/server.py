"""FastAPI application exposing weather lookup and search history."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Body, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from skycast.api_logging import configure_logging, set_log_dir
from skycast.config import Settings
from skycast.exceptions import HistoryStoreError, SkycastError
from skycast.history import HistoryStore
from skycast.models.history import HistoryEntry
from skycast.models.weather import WeatherRecord
from skycast.service import AsyncWeatherService

logger = logging.getLogger(__name__)


class WeatherRequest(BaseModel):
    city_name: str | None = Field(default=None, alias="cityName")


def create_app(
    service: AsyncWeatherService | None = None,
    history: HistoryStore | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the API application.

    Collaborators not passed in are constructed from ``settings`` (or the
    environment). A service built here is closed on shutdown; one passed in
    belongs to the caller.
    """
    settings = settings or Settings.from_env()
    set_log_dir(settings.log_dir)
    owns_service = service is None
    weather_service = service or AsyncWeatherService.from_settings(settings)
    history_store = history or HistoryStore(settings.history_path)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_service:
            await weather_service.close()

    app = FastAPI(title="Skycast", lifespan=lifespan)

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/weather", response_model=list[WeatherRecord])
    async def get_weather(
        payload: WeatherRequest | None = Body(None),
    ) -> list[WeatherRecord] | JSONResponse:
        city_name = ((payload and payload.city_name) or "").strip()
        if not city_name:
            return JSONResponse(status_code=400, content={"error": "City name is required"})
        try:
            records = await weather_service.get_weather_for_city(city_name)
            await run_in_threadpool(history_store.add_city, city_name)
        except SkycastError as exc:
            logger.error("Weather lookup for %r failed: %s", city_name, exc)
            return JSONResponse(status_code=500, content={"error": "Failed to fetch weather data"})
        return records

    @app.get("/api/weather/history", response_model=list[HistoryEntry])
    def get_history() -> list[HistoryEntry] | JSONResponse:
        try:
            return history_store.list_cities()
        except HistoryStoreError as exc:
            logger.error("Reading search history failed: %s", exc)
            return JSONResponse(status_code=500, content={"error": "Failed to fetch search history"})

    @app.delete("/api/weather/history/{entry_id}")
    def delete_history_entry(entry_id: str) -> JSONResponse:
        try:
            deleted = history_store.remove_city(entry_id)
        except HistoryStoreError as exc:
            logger.error("Deleting %s from search history failed: %s", entry_id, exc)
            return JSONResponse(
                status_code=500,
                content={"error": "Failed to delete city from search history"},
            )
        if deleted is None:
            return JSONResponse(
                status_code=404,
                content={"error": "City not found in search history"},
            )
        return JSONResponse(status_code=200, content={"deletedCity": deleted.model_dump()})

    return app


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    configure_logging()
    uvicorn.run(
        "skycast.server:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
