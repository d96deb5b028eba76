"""Public client classes for the OpenWeatherMap provider."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from weatherfinder._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from weatherfinder._logging import log_api_call
from weatherfinder._query import search_path, weather_path
from weatherfinder.exceptions import (
    ClientError,
    InvalidDataError,
    LookupFailedError,
    MalformedPayloadError,
    MissingCredentialError,
    NetworkError,
    NotFoundError,
    ProviderUnavailableError,
    RateLimitedError,
    SearchFailedError,
    TransportConnectionError,
    TransportDecodeError,
    TransportError,
    TransportStatusError,
    TransportTimeoutError,
    UnauthorizedError,
    WeatherFinderError,
)
from weatherfinder.models.location import Location
from weatherfinder.models.provider import CurrentConditions, GeocodingResult
from weatherfinder.models.weather import WeatherReading

_STATUS_ERRORS: dict[int, type[ClientError]] = {
    401: UnauthorizedError,
    404: NotFoundError,
    429: RateLimitedError,
    500: ProviderUnavailableError,
}


T = TypeVar("T")


def _validate_list(model_type: type[T], data: Any) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise MalformedPayloadError(
            f"Failed to validate {model_type.__name__} response: {exc}", cause=exc
        ) from exc


def _to_locations(data: Any) -> list[Location]:
    return [item.to_location() for item in _validate_list(GeocodingResult, data)]


def _to_reading(location: Location, data: Any) -> WeatherReading:
    if not isinstance(data, dict):
        raise MalformedPayloadError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    if not CurrentConditions.has_required_blocks(data):
        raise InvalidDataError()
    try:
        conditions = CurrentConditions.model_validate(data)
    except ValidationError as exc:
        raise MalformedPayloadError(cause=exc) from exc
    return WeatherReading.from_conditions(location, conditions)


def classify_lookup_error(exc: TransportError) -> ClientError:
    """Translate a transport failure into a user-facing lookup error.

    The returned error keeps ``exc`` on its ``cause`` attribute.
    """
    if isinstance(exc, TransportStatusError):
        error_type = _STATUS_ERRORS.get(exc.status_code)
        if error_type is not None:
            return error_type(cause=exc)
        return LookupFailedError(
            f"{LookupFailedError.default_message} (HTTP {exc.status_code})", cause=exc
        )
    if isinstance(exc, (TransportConnectionError, TransportTimeoutError)):
        return NetworkError(cause=exc)
    if isinstance(exc, TransportDecodeError):
        return MalformedPayloadError(cause=exc)
    return LookupFailedError(f"{LookupFailedError.default_message} ({exc})", cause=exc)


class _CredentialMixin:
    """Holds the API key shared by the sync and async clients."""

    _api_key: str

    def set_credential(self, key: str) -> None:
        """Replace the API key. No validation is performed."""
        self._api_key = key

    @property
    def has_credential(self) -> bool:
        """True once a non-empty API key has been set."""
        return bool(self._api_key)

    def _require_credential(self) -> str:
        # One key per call, even if set_credential runs mid-request.
        api_key = self._api_key
        if not api_key:
            raise MissingCredentialError()
        return api_key


class WeatherClient(_CredentialMixin):
    """Synchronous client for location search and current weather.

    Usage:
        client = WeatherClient()
        client.set_credential("my-api-key")
        places = client.search_locations("Paris")
        reading = client.get_current_weather(places[0])
        client.close()

        # Or as a context manager:
        with WeatherClient(api_key="my-api-key") as client:
            places = client.search_locations("Springfield")
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def search_locations(self, query: str) -> list[Location]:
        """Search for up to five places matching ``query``, in provider order."""
        api_key = self._require_credential()
        try:
            data = self._transport.get(search_path(query, api_key))
            return _to_locations(data)
        except WeatherFinderError as exc:
            raise SearchFailedError(cause=exc) from exc

    @log_api_call
    def get_current_weather(self, location: Location) -> WeatherReading:
        """Get current conditions for a location returned by a search."""
        api_key = self._require_credential()
        try:
            data = self._transport.get(weather_path(location.lat, location.lon, api_key))
        except TransportError as exc:
            raise classify_lookup_error(exc) from exc
        return _to_reading(location, data)


class AsyncWeatherClient(_CredentialMixin):
    """Asynchronous client for location search and current weather.

    Overlapping calls run independently; nothing is serialized or cancelled.

    Usage:
        async with AsyncWeatherClient(api_key="my-api-key") as client:
            places = await client.search_locations("Paris")
            reading = await client.get_current_weather(places[0])
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def search_locations(self, query: str) -> list[Location]:
        """Search for up to five places matching ``query``, in provider order."""
        api_key = self._require_credential()
        try:
            data = await self._transport.get(search_path(query, api_key))
            return _to_locations(data)
        except WeatherFinderError as exc:
            raise SearchFailedError(cause=exc) from exc

    @log_api_call
    async def get_current_weather(self, location: Location) -> WeatherReading:
        """Get current conditions for a location returned by a search."""
        api_key = self._require_credential()
        try:
            data = await self._transport.get(weather_path(location.lat, location.lon, api_key))
        except TransportError as exc:
            raise classify_lookup_error(exc) from exc
        return _to_reading(location, data)
