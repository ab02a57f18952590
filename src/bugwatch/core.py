"""
Assemble weather and insect activity for a location.

This is the boundary where "now" enters: the predictor itself takes the
month as an argument.
"""

from __future__ import annotations

from datetime import date

from bugwatch.analysis.insect_activity import predict_insect_activity
from bugwatch.config import get_settings
from bugwatch.datasources.openweather import WeatherFetcher, get_weather_fetcher
from bugwatch.schemas import ActivityReport


def build_activity_report(
    lat: float,
    lon: float,
    *,
    fetcher: WeatherFetcher | None = None,
    today: date | None = None,
) -> ActivityReport:
    """
    Fetch weather for a coordinate and predict insect activity from it.

    Args:
        lat: Latitude.
        lon: Longitude.
        fetcher: Weather source (defaults to the one selected in settings).
        today: Reference date for the season (defaults to today).
    """
    fetch = fetcher or get_weather_fetcher(get_settings())
    month = (today or date.today()).month

    weather = fetch(lat, lon)
    prediction = predict_insect_activity(weather, latitude=lat, month=month)
    return ActivityReport(weather=weather, insect_activity=prediction)
