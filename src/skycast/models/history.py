"""Search history model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HistoryEntry(BaseModel):
    """A previously searched city. Names are not unique."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
