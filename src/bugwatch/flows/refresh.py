"""
Prefect flow that refreshes the cached weather reading and activity report.

Run locally:
    python -m bugwatch.flows.refresh

Run with Prefect dashboard:
    prefect server start &
    python -m bugwatch.flows.refresh
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from bugwatch.analysis.insect_activity import predict_insect_activity
from bugwatch.config import get_settings
from bugwatch.datasources.openweather import (
    LIVE_ERRORS,
    configured_api_key,
    fetch_current_weather,
    mock_weather,
)
from bugwatch.schemas import ActivityReport, InsectActivityPrediction, WeatherReading
from bugwatch.store import DataStore

store = DataStore(get_settings().data_dir)

WEATHER_PATH = Path("live/weather.json")
REPORT_PATH = Path("derived/insect_activity.json")

WEATHER_TTL = timedelta(hours=1)

LIVE_SOURCE = "openweathermap.org"
MOCK_SOURCE = "mock"


@task(name="fetch-weather", retries=2, retry_delay_seconds=5)
def fetch_weather(lat: float, lon: float, api_key: str) -> WeatherReading:
    """Fetch current weather from OpenWeatherMap."""
    return fetch_current_weather(lat, lon, api_key)


def current_weather(lat: float, lon: float) -> tuple[WeatherReading, str]:
    """Get a reading from the configured source, with the source it came from."""
    settings = get_settings()
    if settings.weather_source == "mock":
        return mock_weather(lat, lon), MOCK_SOURCE

    api_key = configured_api_key(settings)
    if api_key is None:
        print("No weather API key configured, using mock weather data")
        return mock_weather(lat, lon), MOCK_SOURCE

    try:
        return fetch_weather(lat, lon, api_key), LIVE_SOURCE
    except LIVE_ERRORS as e:
        if settings.weather_source == "live":
            raise
        print(f"Weather API call failed ({e}), using mock weather data")
        return mock_weather(lat, lon), MOCK_SOURCE


@task(name="save-weather")
def save_weather(weather: WeatherReading, source: str, lat: float, lon: float) -> Path:
    """
    Cache the weather reading in the live tier.

    Only real readings get a TTL; generated ones are stale immediately so the
    next run tries the API again.
    """
    valid_until = datetime.now(UTC) + WEATHER_TTL if source == LIVE_SOURCE else None
    return store.write(
        WEATHER_PATH,
        weather.model_dump(mode="json", by_alias=True),
        source=source,
        valid_until=valid_until,
        location={"lat": lat, "lon": lon},
    )


@task(name="predict-activity")
def predict_activity(weather: WeatherReading, lat: float, month: int) -> InsectActivityPrediction:
    """Run the insect activity rules for one reading."""
    return predict_insect_activity(weather, latitude=lat, month=month)


@task(name="save-report")
def save_report(report: ActivityReport, lat: float, lon: float) -> Path:
    """Write the combined report to the derived tier."""
    return store.write(
        REPORT_PATH,
        report.model_dump(mode="json", by_alias=True),
        source="bugwatch",
        location={"lat": lat, "lon": lon},
    )


@flow(name="refresh-activity", log_prints=True)
def refresh_activity(
    lat: float | None = None,
    lon: float | None = None,
    today: date | None = None,
) -> dict[str, Any]:
    """
    Refresh weather and the insect activity report for one location.

    Coordinates default to the configured location. Reuses the cached reading
    while it is fresh and the location matches.
    """
    settings = get_settings()
    lat = settings.lat if lat is None else lat
    lon = settings.lon if lon is None else lon

    cached = store.read_raw(WEATHER_PATH) or {}
    same_place = cached.get("meta", {}).get("location") == {"lat": lat, "lon": lon}

    if same_place and store.is_fresh(WEATHER_PATH):
        print("Weather data is fresh, skipping fetch.")
        weather = WeatherReading.model_validate(cached["data"])
    else:
        print(f"Fetching weather for ({lat}, {lon})...")
        weather, source = current_weather(lat, lon)
        weather_path = save_weather(weather, source, lat, lon)
        print(f"Saved {source} weather for {weather.location} to {weather_path}")

    month = (today or date.today()).month
    prediction = predict_activity(weather, lat, month)
    report = ActivityReport(weather=weather, insect_activity=prediction)
    report_path = save_report(report, lat, lon)
    print(f"Insect activity is {prediction.overall}, report saved to {report_path}")

    return {
        "location": weather.location,
        "overall": str(prediction.overall),
        "flying": str(prediction.flying),
        "seasonal": str(prediction.seasonal.activity),
        "output": str(report_path),
    }


if __name__ == "__main__":
    result = refresh_activity()
    print(f"Flow complete: {result}")
