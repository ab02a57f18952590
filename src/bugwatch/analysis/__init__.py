"""Insect activity rules.

Pure functions over explicit inputs. Dependency rule: analysis/ imports
schemas and reference/ only. It never fetches data or reads the clock;
the month is always passed in by the caller.

Modules:
  - seasons: (month, hemisphere) -> Season
  - insect_activity: (weather reading, latitude, month) -> InsectActivityPrediction
"""

from bugwatch.analysis.insect_activity import predict_insect_activity
from bugwatch.analysis.seasons import is_northern_hemisphere, resolve_season

__all__ = ["is_northern_hemisphere", "predict_insect_activity", "resolve_season"]
