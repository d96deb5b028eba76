"""weatherfinder: typed Python client for OpenWeatherMap location search and current weather."""

import logging

from weatherfinder._logging import disable_file_logging, enable_file_logging
from weatherfinder.client import AsyncWeatherClient, WeatherClient
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
from weatherfinder.models import Location, WeatherReading

logging.getLogger("weatherfinder").addHandler(logging.NullHandler())

__all__ = [
    "AsyncWeatherClient",
    "ClientError",
    "InvalidDataError",
    "Location",
    "LookupFailedError",
    "MalformedPayloadError",
    "MissingCredentialError",
    "NetworkError",
    "NotFoundError",
    "ProviderUnavailableError",
    "RateLimitedError",
    "SearchFailedError",
    "TransportConnectionError",
    "TransportDecodeError",
    "TransportError",
    "TransportStatusError",
    "TransportTimeoutError",
    "UnauthorizedError",
    "WeatherClient",
    "WeatherFinderError",
    "WeatherReading",
    "disable_file_logging",
    "enable_file_logging",
]

__version__ = "0.1.0"
