"""Deterministic offline weather.

Used when no API key is configured or the live call fails. Every value is a
simple function of the coordinates, so the same point always gets the same
weather (apart from the timestamp). Temperature falls off with distance from
the equator; city, condition, humidity, and wind are arithmetic noise.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime

from bugwatch.datasources.openweather.client import icon_url
from bugwatch.schemas import WeatherReading

CITY_NAMES = ("Springfield", "Riverside", "Oakville", "Meadowbrook", "Cedar Creek")
CONDITIONS = ("Clear", "Clouds", "Rain", "Mist", "Thunderstorm")
CONDITION_ICONS = ("01d", "03d", "10d", "50d", "11d")

BASE_TEMP_C = 15


def _pick(value: float, size: int) -> int:
    # fmod keeps the sign of the dividend; abs() folds negatives back in range.
    return abs(math.floor(math.fmod(value, size))) % size


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def mock_weather(lat: float, lon: float, now: datetime | None = None) -> WeatherReading:
    """
    Generate a plausible weather reading for a coordinate.

    Args:
        lat: Latitude.
        lon: Longitude.
        now: Observation time (defaults to the current UTC time).
    """
    observed = now or datetime.now(UTC)
    condition_idx = _pick(lat + lon, len(CONDITIONS))

    return WeatherReading(
        location=CITY_NAMES[_pick(lat * lon, len(CITY_NAMES))],
        temperature=_round_half_up(BASE_TEMP_C + (90 - abs(lat)) / 3),
        condition=CONDITIONS[condition_idx],
        humidity=math.floor(50 + math.sin(lat * lon) * 30),
        wind_speed=max(0, math.floor(3 + math.cos(lat + lon) * 6)),
        icon_url=icon_url(CONDITION_ICONS[condition_idx]),
        timestamp=observed.timestamp(),
    )
