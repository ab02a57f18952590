"""bugwatch - weather-based insect activity predictions for insect spotters.

Architecture::

    datasources/   Weather readings (OpenWeatherMap, deterministic offline fallback)
    reference/     Static thresholds, seasonal insect lists, advice text
    analysis/      Pure rules: season resolver, insect activity predictor
    core.py        Fetch + predict for one location (reads today's date)
    api.py         FastAPI app with the JSON envelope
    flows/         Prefect refresh flow (fetch, predict, cache)
    store.py       JSON cache with TTL metadata
    services/      Shared HTTP session with retry

Data flow: datasources -> analysis -> core -> api / flows (-> store)
"""

__version__ = "0.1.0"

from bugwatch.config import Settings
from bugwatch.schemas import ActivityLevel, InsectActivityPrediction, Season, WeatherReading

__all__ = [
    "ActivityLevel",
    "InsectActivityPrediction",
    "Season",
    "Settings",
    "WeatherReading",
    "__version__",
]
