"""Custom exceptions for the weatherfinder client."""

from __future__ import annotations


class WeatherFinderError(Exception):
    """Base exception for all weatherfinder errors."""


# ── Transport layer ────────────────────────────────────────────


class TransportError(WeatherFinderError):
    """Base exception for failures raised by the HTTP transport."""


class TransportStatusError(TransportError):
    """Raised when the provider returns a non-2xx response."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class TransportDecodeError(TransportError):
    """Raised when a response body is not valid JSON."""


class TransportConnectionError(TransportError):
    """Raised when the client cannot reach the provider."""


class TransportTimeoutError(TransportError):
    """Raised when a request to the provider times out."""


# ── Client layer ───────────────────────────────────────────────


class ClientError(WeatherFinderError):
    """Base exception for user-facing client failures.

    Every subclass carries a non-empty, human-readable default message that a
    presentation layer can render as-is. The triggering exception, if any, is
    kept on ``cause`` and chained as ``__cause__`` by the client.
    """

    default_message = "Weather request failed"

    def __init__(self, message: str | None = None, cause: BaseException | None = None) -> None:
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)


class MissingCredentialError(ClientError):
    """Raised when an operation is attempted before an API key is set."""

    default_message = "API key is required"


class SearchFailedError(ClientError):
    """Raised when a location search fails for any reason."""

    default_message = "Failed to search locations"


class InvalidDataError(ClientError):
    """Raised when a weather response lacks its conditions or main block."""

    default_message = "Invalid weather data received from the provider"


class UnauthorizedError(ClientError):
    """Raised on HTTP 401 from the weather endpoint."""

    default_message = "Invalid API key. Please check your OpenWeatherMap API key."


class NotFoundError(ClientError):
    """Raised on HTTP 404 from the weather endpoint."""

    default_message = "Weather data not found for this location"


class RateLimitedError(ClientError):
    """Raised on HTTP 429 from the weather endpoint."""

    default_message = "Rate limit exceeded. Please wait a moment and try again."


class ProviderUnavailableError(ClientError):
    """Raised on HTTP 500 from the weather endpoint."""

    default_message = "The weather service is experiencing problems. Please try again later."


class NetworkError(ClientError):
    """Raised when the provider cannot be reached."""

    default_message = "Network error. Please check your internet connection."


class MalformedPayloadError(ClientError):
    """Raised when a weather response cannot be decoded or has the wrong shape."""

    default_message = "Received malformed data from the weather service"


class LookupFailedError(ClientError):
    """Raised for any other weather lookup failure."""

    default_message = "Failed to get weather data"
