"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from skycast.exceptions import ProviderTransportError, SkycastError

DEFAULT_TIMEOUT = 30.0


def _handle_response(
    response: httpx.Response,
    error: type[ProviderTransportError],
    decode_error: type[SkycastError],
) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise error(response.reason_phrase, status_code=response.status_code)
    try:
        return response.json()
    except ValueError as exc:
        raise decode_error(f"Response body is not valid JSON: {exc}") from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(
        self,
        endpoint: str,
        params: list[tuple[str, str]],
        *,
        error: type[ProviderTransportError],
        decode_error: type[SkycastError],
    ) -> Any:
        """Perform a GET request and return parsed JSON.

        Transport failures are raised as ``error``; an undecodable body as
        ``decode_error``.
        """
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise error(f"Request timed out: {exc}") from exc
        except httpx.TransportError as exc:
            raise error(str(exc)) from exc
        return _handle_response(response, error, decode_error)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(
        self,
        endpoint: str,
        params: list[tuple[str, str]],
        *,
        error: type[ProviderTransportError],
        decode_error: type[SkycastError],
    ) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise error(f"Request timed out: {exc}") from exc
        except httpx.TransportError as exc:
            raise error(str(exc)) from exc
        return _handle_response(response, error, decode_error)

    async def close(self) -> None:
        await self._client.aclose()
