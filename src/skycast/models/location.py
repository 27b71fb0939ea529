"""Geocoding result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Latitude/longitude pair resolved from a city name.

    Parsed from the provider's ``lat``/``lon`` keys; any other keys in a
    geocoding result (name, country, local_names) are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    latitude: float = Field(alias="lat")
    longitude: float = Field(alias="lon")
