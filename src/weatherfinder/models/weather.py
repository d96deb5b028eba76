"""Current weather reading model."""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal

from pydantic import BaseModel, ConfigDict

from weatherfinder.models.location import Location
from weatherfinder.models.provider import CurrentConditions

MS_TO_KMH = 3.6
METRES_PER_KM = 1000
_HALF = Decimal("0.5")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    # Decimal arithmetic: 0.49999999999999994 + 0.5 must stay below 1
    return int((Decimal(repr(value)) + _HALF).to_integral_value(rounding=ROUND_FLOOR))


class WeatherReading(BaseModel):
    """Current conditions for a location, in display units.

    ``temperature`` is in °C, ``humidity`` in percent, ``wind_speed`` in km/h
    and ``visibility`` in km. All four are whole numbers.
    """

    model_config = ConfigDict(frozen=True)

    location: Location
    temperature: int
    description: str
    humidity: int
    wind_speed: int
    visibility: int
    icon: str

    @classmethod
    def from_conditions(cls, location: Location, conditions: CurrentConditions) -> WeatherReading:
        """Build a reading for ``location`` from a validated provider response.

        The given ``location`` is carried over as-is; whatever place the
        provider echoes back is ignored.
        """
        condition = conditions.weather[0]
        wind_speed = conditions.wind.speed if conditions.wind is not None else 0.0
        visibility = conditions.visibility if conditions.visibility is not None else 0.0
        return cls(
            location=location,
            temperature=round_half_up(conditions.main.temp),
            description=condition.description,
            humidity=round_half_up(conditions.main.humidity),
            wind_speed=round_half_up(wind_speed * MS_TO_KMH),
            visibility=round_half_up(visibility / METRES_PER_KM),
            icon=condition.icon,
        )
