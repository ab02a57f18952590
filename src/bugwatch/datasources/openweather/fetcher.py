"""Pick a weather source from settings.

Every source has the same shape, ``(lat, lon) -> WeatherReading``.

- ``mock``: generated readings only, never touches the network
- ``auto``: OpenWeatherMap, falling back to generated readings when no key
  is configured or the call fails
- ``live``: OpenWeatherMap only; a missing key or a failed call is an error
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING

import requests

from bugwatch.datasources.openweather.current import WeatherPayloadError, fetch_current_weather
from bugwatch.datasources.openweather.mock import mock_weather
from bugwatch.schemas import WeatherReading

if TYPE_CHECKING:
    from bugwatch.config import Settings

logger = logging.getLogger(__name__)

WeatherFetcher = Callable[[float, float], WeatherReading]

# Errors that "auto" absorbs by switching to generated readings
LIVE_ERRORS = (requests.RequestException, WeatherPayloadError)


def configured_api_key(settings: Settings) -> str | None:
    """Return the OpenWeatherMap key, raising if ``live`` is selected without one."""
    key = settings.weather_api_key.get_secret_value() if settings.weather_api_key else None
    if not key and settings.weather_source == "live":
        raise ValueError("weather_source is 'live' but no weather API key is configured")
    return key or None


def live_with_fallback(api_key: str | None) -> WeatherFetcher:
    """Build a fetcher that tries OpenWeatherMap and falls back to mock data."""

    def fetch(lat: float, lon: float) -> WeatherReading:
        if not api_key:
            logger.warning("No weather API key configured, using mock weather data")
            return mock_weather(lat, lon)
        try:
            return fetch_current_weather(lat, lon, api_key)
        except LIVE_ERRORS:
            logger.exception("Weather API call failed, using mock weather data")
            return mock_weather(lat, lon)

    return fetch


def get_weather_fetcher(settings: Settings) -> WeatherFetcher:
    """Return the weather source selected by ``settings.weather_source``."""
    if settings.weather_source == "mock":
        return mock_weather

    key = configured_api_key(settings)
    if settings.weather_source == "live":
        return partial(fetch_current_weather, api_key=key)
    return live_with_fallback(key)
