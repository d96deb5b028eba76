"""Provider payload models for the geocoding and current weather endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from weatherfinder.models.location import Location


class GeocodingResult(BaseModel):
    """One item of a ``/geo/1.0/direct`` response."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    country: str
    state: str | None = None
    lat: float
    lon: float

    def to_location(self) -> Location:
        return Location(
            name=self.name,
            country=self.country,
            state=self.state or "",
            lat=self.lat,
            lon=self.lon,
        )


class WeatherCondition(BaseModel):
    """Entry of the ``weather`` list."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    main: str | None = None
    description: str
    icon: str


class MainConditions(BaseModel):
    """The ``main`` block (metric units)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    temp: float
    humidity: float
    feels_like: float | None = None
    pressure: float | None = None


class Wind(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    speed: float = 0.0
    deg: float | None = None


class CurrentConditions(BaseModel):
    """A ``/data/2.5/weather`` response, reduced to the fields we read."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    weather: list[WeatherCondition]
    main: MainConditions
    wind: Wind | None = None
    visibility: float | None = None

    @staticmethod
    def has_required_blocks(data: Any) -> bool:
        """True if ``data`` has a non-empty ``weather`` list and a populated ``main``."""
        if not isinstance(data, dict):
            return False
        weather = data.get("weather")
        main = data.get("main")
        return isinstance(weather, list) and bool(weather) and isinstance(main, dict) and bool(main)
