"""weatherfinder data models."""

from weatherfinder.models.location import Location
from weatherfinder.models.provider import (
    CurrentConditions,
    GeocodingResult,
    MainConditions,
    WeatherCondition,
    Wind,
)
from weatherfinder.models.weather import WeatherReading

__all__ = [
    "CurrentConditions",
    "GeocodingResult",
    "Location",
    "MainConditions",
    "WeatherCondition",
    "WeatherReading",
    "Wind",
]
