"""Forecast response models (5 day / 3 hour series)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WeatherCondition(BaseModel):
    """Condition code and description for one forecast slice."""

    model_config = ConfigDict(frozen=True)

    icon: str
    description: str


class MainReadings(BaseModel):
    """Temperature (Kelvin) and relative humidity (percent)."""

    model_config = ConfigDict(frozen=True)

    temp: float
    humidity: int


class Wind(BaseModel):
    model_config = ConfigDict(frozen=True)

    speed: float


class ForecastEntry(BaseModel):
    """One 3-hour slice of the forecast time series."""

    model_config = ConfigDict(frozen=True)

    dt: int
    dt_txt: str
    weather: list[WeatherCondition] = Field(min_length=1)
    main: MainReadings
    wind: Wind


class ForecastCity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class ForecastResponse(BaseModel):
    """Forecast payload: the resolved city plus its time series."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    city: ForecastCity
    entries: list[ForecastEntry] = Field(alias="list", min_length=1)
