"""
Domain models for bugwatch.

Pydantic models for weather readings, insect activity predictions, and the
JSON envelope returned by the API. Field aliases define the wire format
(camelCase); Python code uses the snake_case names.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enumerations
# =============================================================================


class ActivityLevel(StrEnum):
    """Qualitative bucket of expected insect presence."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Ordering key: low < moderate < high."""
        return _ACTIVITY_RANK[self]


_ACTIVITY_RANK = {ActivityLevel.LOW: 0, ActivityLevel.MODERATE: 1, ActivityLevel.HIGH: 2}


class Season(StrEnum):
    """Calendar season, relative to the observer's hemisphere."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


# =============================================================================
# Geographic
# =============================================================================


class Location(BaseModel):
    """Geographic point."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


# =============================================================================
# Weather
# =============================================================================


class WeatherReading(BaseModel):
    """Normalized current-weather snapshot for a coordinate.

    Produced either by the live OpenWeatherMap client or by the deterministic
    offline fallback. Values are trusted as given; nothing here is validated
    beyond type coercion.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    location: str = Field(..., description="Display name of the nearest place")
    temperature: float = Field(..., description="Air temperature in Celsius")
    condition: str = Field(..., description="Short label, e.g. Clear, Rain, Clouds")
    humidity: float = Field(..., description="Relative humidity in percent")
    wind_speed: float = Field(..., alias="windSpeed", description="Wind speed in m/s")
    icon_url: str = Field(..., alias="iconUrl")
    timestamp: float = Field(..., description="Observation time, epoch seconds")


# =============================================================================
# Insect activity
# =============================================================================


class SeasonalActivity(BaseModel):
    """Activity level for the current season and the insects typical of it."""

    model_config = ConfigDict(frozen=True)

    activity: ActivityLevel
    insects: list[str] = Field(..., min_length=1)


class InsectActivityPrediction(BaseModel):
    """Composite activity forecast derived from one weather reading."""

    model_config = ConfigDict(frozen=True)

    overall: ActivityLevel
    flying: ActivityLevel
    seasonal: SeasonalActivity
    recommendations: list[str] = Field(default_factory=list)


class ActivityReport(BaseModel):
    """Weather reading paired with the prediction computed from it."""

    model_config = ConfigDict(populate_by_name=True)

    weather: WeatherReading
    insect_activity: InsectActivityPrediction = Field(..., alias="insectActivity")


# =============================================================================
# API
# =============================================================================


class ApiResponse(BaseModel):
    """``{success, data}`` / ``{success: false, error}`` response envelope."""

    success: bool
    data: ActivityReport | None = None
    error: str | None = None

    def to_json_dict(self) -> dict[str, object]:
        """Serialize with wire aliases, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
