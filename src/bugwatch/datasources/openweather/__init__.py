"""OpenWeatherMap current-weather data source.

Public API:
  - current: fetch_current_weather, parse_current_weather (live API)
  - mock: mock_weather (deterministic offline fallback)
  - fetcher: get_weather_fetcher (settings-driven choice between the two)
"""

from bugwatch.datasources.openweather.current import (
    WeatherPayloadError,
    fetch_current_weather,
    parse_current_weather,
)
from bugwatch.datasources.openweather.fetcher import (
    LIVE_ERRORS,
    WeatherFetcher,
    configured_api_key,
    get_weather_fetcher,
    live_with_fallback,
)
from bugwatch.datasources.openweather.mock import mock_weather

__all__ = [
    "LIVE_ERRORS",
    "WeatherFetcher",
    "WeatherPayloadError",
    "configured_api_key",
    "fetch_current_weather",
    "get_weather_fetcher",
    "live_with_fallback",
    "mock_weather",
    "parse_current_weather",
]
