"""
HTTP API.

Routes:
  GET /health                        liveness + version
  GET /api/weather-insect-activity   weather and insect activity for lat/lon

Responses use the ``{success, data}`` / ``{success: false, error}`` envelope.

Run:
    uvicorn bugwatch.api:app
"""

from __future__ import annotations

import logging
import math

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from bugwatch import __version__
from bugwatch.config import Settings, get_settings
from bugwatch.core import build_activity_report
from bugwatch.datasources.openweather import WeatherFetcher, get_weather_fetcher
from bugwatch.schemas import ApiResponse

logger = logging.getLogger(__name__)

INVALID_COORDINATES = "Invalid coordinates. Please provide valid latitude and longitude."
COORDINATES_OUT_OF_RANGE = (
    "Coordinates out of range. Latitude must be between -90 and 90, "
    "longitude between -180 and 180."
)
PREDICTION_FAILED = "Failed to fetch weather and insect activity predictions."


def _envelope(response: ApiResponse, status_code: int = 200) -> JSONResponse:
    return JSONResponse(response.to_json_dict(), status_code=status_code)


def _error(message: str, status_code: int) -> JSONResponse:
    return _envelope(ApiResponse(success=False, error=message), status_code)


def parse_coordinate(raw: str | None) -> float | None:
    """Parse a query-string coordinate. Returns None if missing or not a finite number."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def create_app(
    settings: Settings | None = None,
    fetcher: WeatherFetcher | None = None,
) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()
    fetch_weather = fetcher or get_weather_fetcher(settings)

    app = FastAPI(title=settings.app_name, version=__version__, debug=settings.debug)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @app.get("/api/weather-insect-activity")
    def weather_insect_activity(lat: str | None = None, lon: str | None = None) -> JSONResponse:
        """Current weather and insect activity prediction for a coordinate."""
        latitude = parse_coordinate(lat)
        longitude = parse_coordinate(lon)
        if latitude is None or longitude is None:
            return _error(INVALID_COORDINATES, 400)
        if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
            return _error(COORDINATES_OUT_OF_RANGE, 400)

        try:
            report = build_activity_report(latitude, longitude, fetcher=fetch_weather)
        except Exception:
            logger.exception("Error fetching weather and insect activity for (%s, %s)", lat, lon)
            return _error(PREDICTION_FAILED, 500)

        return _envelope(ApiResponse(success=True, data=report))

    return app


app = create_app()
