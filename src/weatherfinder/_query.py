"""Request path builder for the provider endpoints."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, urlencode

GEOCODING_ENDPOINT = "/geo/1.0/direct"
WEATHER_ENDPOINT = "/data/2.5/weather"
SEARCH_LIMIT = 5
UNITS = "metric"


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Keyword order is preserved and ``None`` values are dropped.

    Args:
        **kwargs: Keyword arguments where keys are parameter names and values are
                  anything with a sensible ``str()``.

    Returns:
        List of (key, value) tuples.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, str(value)))
    return params


def build_path(endpoint: str, **kwargs: Any) -> str:
    """Join an endpoint and its percent-encoded query string.

    Usage:
        build_path("/geo/1.0/direct", q="São Paulo", limit=5)
        # -> "/geo/1.0/direct?q=S%C3%A3o%20Paulo&limit=5"
    """
    params = build_query_params(**kwargs)
    if not params:
        return endpoint
    return f"{endpoint}?{urlencode(params, quote_via=quote)}"


def search_path(query: str, api_key: str) -> str:
    """Path for a geocoding search capped at ``SEARCH_LIMIT`` results."""
    return build_path(GEOCODING_ENDPOINT, q=query, limit=SEARCH_LIMIT, appid=api_key)


def weather_path(lat: float, lon: float, api_key: str) -> str:
    """Path for a current-conditions lookup in metric units."""
    return build_path(WEATHER_ENDPOINT, lat=lat, lon=lon, units=UNITS, appid=api_key)
