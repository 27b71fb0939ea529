"""Custom exceptions for the Skycast weather client."""

from __future__ import annotations


class SkycastError(Exception):
    """Base exception for all Skycast errors."""


class InvalidQueryError(SkycastError):
    """Raised when a lookup is attempted without a city name."""


class ProviderTransportError(SkycastError):
    """Raised when the weather provider cannot be reached or answers 4xx/5xx.

    ``status_code`` is None when the request never produced a response
    (connection refused, timeout, malformed base URL).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(f"HTTP {status_code}: {message}")


class LookupTransportError(ProviderTransportError):
    """Raised when the geocoding request fails."""


class LocationNotFoundError(SkycastError):
    """Raised when the geocoding endpoint returns no match for a city."""

    def __init__(self, city: str) -> None:
        self.city = city
        super().__init__(f"No location found for {city!r}")


class ForecastTransportError(ProviderTransportError):
    """Raised when the forecast request fails."""


class ForecastDecodeError(SkycastError):
    """Raised when a forecast body cannot be decoded into the expected shape."""


class HistoryStoreError(SkycastError):
    """Raised when the search history file cannot be read or parsed."""
