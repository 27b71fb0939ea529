"""Query parameter helpers for the OpenWeather endpoints."""

from __future__ import annotations

from typing import Any

from skycast.exceptions import InvalidQueryError


def require_city(city: str | None) -> str:
    """Return ``city`` stripped of surrounding whitespace.

    Raises:
        InvalidQueryError: If the name is unset or blank.
    """
    if city is None or not city.strip():
        raise InvalidQueryError("City name is not set")
    return city.strip()


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    ``None`` values are dropped; everything else is sent as ``str(value)``.
    An empty string is still sent, so a missing API key reaches the provider
    and comes back as a transport error.

    Args:
        **kwargs: Parameter names mapped to plain values.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, str(value)))
    return params
