"""Normalized weather record returned to callers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WeatherRecord(BaseModel):
    """Current conditions or a single forecast day.

    Temperatures are Fahrenheit. Dumped with ``by_alias=True`` the keys are
    camelCase (``iconDescription``, ``tempF``, ``windSpeed``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    city: str
    date: str
    icon: str
    icon_description: str
    temp_f: float
    humidity: int
    wind_speed: float
