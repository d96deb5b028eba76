"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

from weatherfinder.models.location import Location

BASE_URL = "https://api.openweathermap.org"
SEARCH_URL = f"{BASE_URL}/geo/1.0/direct"
WEATHER_URL = f"{BASE_URL}/data/2.5/weather"
API_KEY = "test-key-123"


SAMPLE_SEARCH = [
    {
        "name": "Springfield",
        "local_names": {"en": "Springfield"},
        "lat": 39.7990175,
        "lon": -89.6439575,
        "country": "US",
        "state": "Illinois",
    },
    {
        "name": "Springfield",
        "lat": 37.2081729,
        "lon": -93.2922715,
        "country": "US",
        "state": "Missouri",
    },
    {
        "name": "Springfield",
        "lat": -43.3380556,
        "lon": 171.9305556,
        "country": "NZ",
    },
]

SAMPLE_WEATHER = {
    "coord": {"lon": 2.3522, "lat": 48.8566},
    "weather": [
        {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"},
    ],
    "base": "stations",
    "main": {
        "temp": 21.7,
        "feels_like": 21.2,
        "temp_min": 20.1,
        "temp_max": 23.0,
        "pressure": 1016,
        "humidity": 56,
    },
    "visibility": 8500,
    "wind": {"speed": 5.0, "deg": 240},
    "clouds": {"all": 75},
    "dt": 1718285400,
    "sys": {"country": "FR", "sunrise": 1718250000, "sunset": 1718308000},
    "timezone": 7200,
    "id": 2988507,
    "name": "Paris 01 Louvre",
    "cod": 200,
}


@pytest.fixture
def paris() -> Location:
    return Location(name="Paris", country="FR", state="", lat=48.8566, lon=2.3522)


@pytest.fixture
def api_key() -> str:
    return API_KEY
