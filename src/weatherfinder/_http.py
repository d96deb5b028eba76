"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import logging
import re
from typing import Any

import httpx

from weatherfinder.exceptions import (
    TransportConnectionError,
    TransportDecodeError,
    TransportStatusError,
    TransportTimeoutError,
)

DEFAULT_BASE_URL = "https://api.openweathermap.org"
DEFAULT_TIMEOUT = 10.0

logger = logging.getLogger("weatherfinder.http")

_APPID_RE = re.compile(r"(appid=)[^&]*")


def redact(path_and_query: str) -> str:
    """Mask the API key in a request path so it can be logged."""
    return _APPID_RE.sub(r"\1***", path_and_query)


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if not response.is_success:
        raise TransportStatusError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise TransportDecodeError(f"Response body is not valid JSON: {exc}") from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, path_and_query: str) -> Any:
        """Perform a GET request and return parsed JSON."""
        logger.debug("GET %s", redact(path_and_query))
        try:
            response = self._client.get(path_and_query)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(str(exc)) from exc
        except httpx.DecodingError as exc:
            raise TransportDecodeError(f"Response body could not be decoded: {exc}") from exc
        except httpx.TransportError as exc:
            raise TransportConnectionError(str(exc)) from exc
        logger.debug("GET %s -> %d", redact(path_and_query), response.status_code)
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, path_and_query: str) -> Any:
        """Perform an async GET request and return parsed JSON."""
        logger.debug("GET %s", redact(path_and_query))
        try:
            response = await self._client.get(path_and_query)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(str(exc)) from exc
        except httpx.DecodingError as exc:
            raise TransportDecodeError(f"Response body could not be decoded: {exc}") from exc
        except httpx.TransportError as exc:
            raise TransportConnectionError(str(exc)) from exc
        logger.debug("GET %s -> %d", redact(path_and_query), response.status_code)
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
