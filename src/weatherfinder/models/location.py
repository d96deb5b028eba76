"""Geocoded location model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Location(BaseModel):
    """A place returned by a location search.

    Searches can return several places with the same name, so display code
    should pair ``(name, country, state)`` with the result's position.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    state: str = ""
    lat: float
    lon: float

    @field_validator("state", mode="before")
    @classmethod
    def _state_default(cls, value: object) -> object:
        return "" if value is None else value
