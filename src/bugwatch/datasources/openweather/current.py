"""Current conditions from the OpenWeatherMap Current Weather API."""

from __future__ import annotations

from typing import Any

from bugwatch.datasources.openweather.client import CURRENT_WEATHER_URL, UNITS, icon_url
from bugwatch.schemas import WeatherReading
from bugwatch.services.http import session


class WeatherPayloadError(ValueError):
    """The weather API answered with a body we can't interpret."""


def parse_current_weather(payload: dict[str, Any]) -> WeatherReading:
    """
    Normalize an OpenWeatherMap ``/weather`` response.

    Raises:
        WeatherPayloadError: If a required field is missing or malformed.
    """
    try:
        condition = payload["weather"][0]
        return WeatherReading(
            location=payload["name"],
            temperature=payload["main"]["temp"],
            condition=condition["main"],
            humidity=payload["main"]["humidity"],
            wind_speed=payload["wind"]["speed"],
            icon_url=icon_url(condition["icon"]),
            timestamp=payload["dt"],
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        msg = f"Unexpected weather payload: {e}"
        raise WeatherPayloadError(msg) from e


def fetch_current_weather(lat: float, lon: float, api_key: str) -> WeatherReading:
    """
    Fetch current weather for a coordinate.

    Args:
        lat: Latitude.
        lon: Longitude.
        api_key: OpenWeatherMap API key.

    Raises:
        requests.RequestException: On network errors or non-2xx responses.
        WeatherPayloadError: If the response body is not usable.
    """
    params: dict[str, str | float] = {
        "lat": lat,
        "lon": lon,
        "units": UNITS,
        "appid": api_key,
    }
    resp = session.get(CURRENT_WEATHER_URL, params=params)
    resp.raise_for_status()
    try:
        payload: dict[str, Any] = resp.json()
    except ValueError as e:
        msg = "Weather API returned a non-JSON body"
        raise WeatherPayloadError(msg) from e
    return parse_current_weather(payload)
