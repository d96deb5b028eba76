"""Formatting helpers for presenting search results and readings."""

from __future__ import annotations

from weatherfinder.models.location import Location
from weatherfinder.models.weather import WeatherReading

ICON_URL = "https://openweathermap.org/img/wn/{code}@2x.png"


def location_label(location: Location) -> str:
    """Format the secondary line of a search result: 'FR' or 'US, Illinois'."""
    if location.state:
        return f"{location.country}, {location.state}"
    return location.country


def location_title(location: Location) -> str:
    """Format a location on one line: 'Springfield, US, Illinois'."""
    return f"{location.name}, {location_label(location)}"


def location_key(location: Location, index: int) -> str:
    """Unique display key for the ``index``-th search result."""
    return f"{location.name}-{location.country}-{location.state}-{index}"


def icon_url(code: str) -> str:
    """URL of the provider's image for an icon code such as '10d'."""
    return ICON_URL.format(code=code)


def format_reading(reading: WeatherReading) -> str:
    """Multi-line summary of a reading with units."""
    return "\n".join(
        [
            location_title(reading.location),
            f"{reading.temperature}°C, {reading.description}",
            f"Humidity: {reading.humidity}%",
            f"Wind: {reading.wind_speed} km/h",
            f"Visibility: {reading.visibility} km",
        ]
    )
