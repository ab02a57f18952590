"""Predict insect activity from a weather reading and the calendar season.

Heuristic rules, evaluated in a fixed order:

- overall and flying activity: first matching rule wins
- seasonal activity: one rule per season, plus a fixed species list
- recommendations: every rule that holds appends one line, in order

The rule order matters. A hot, humid, windy reading is "high" overall
because the hot+humid rule is checked before the rainy/windy rule.

Weather conditions are matched by case-insensitive substring ("rain",
"clear") against the provider's free-text label.
"""

from __future__ import annotations

from dataclasses import dataclass

from bugwatch.analysis.seasons import is_northern_hemisphere, resolve_season
from bugwatch.reference.activity import (
    ADVICE_CLEAR_AND_WARM,
    ADVICE_HIGH_ACTIVITY,
    ADVICE_LOW_ACTIVITY,
    ADVICE_MOSQUITOES,
    ADVICE_RAIN,
    CLEAR_KEYWORD,
    COLD_TEMP_C,
    HOT_TEMP_C,
    HUMID_PCT,
    RAIN_KEYWORD,
    SEASONAL_ADVICE,
    SEASONAL_INSECTS,
    WARM_TEMP_C,
    WINDY_SPEED_MS,
)
from bugwatch.schemas import (
    ActivityLevel,
    InsectActivityPrediction,
    Season,
    SeasonalActivity,
    WeatherReading,
)


@dataclass(frozen=True)
class WeatherFactors:
    """Boolean weather predicates that drive every rule."""

    cold: bool
    warm: bool
    hot: bool
    rainy: bool
    windy: bool
    humid: bool
    clear: bool

    @classmethod
    def from_reading(cls, weather: WeatherReading) -> WeatherFactors:
        condition = weather.condition.lower()
        return cls(
            cold=weather.temperature < COLD_TEMP_C,
            warm=weather.temperature > WARM_TEMP_C,
            hot=weather.temperature > HOT_TEMP_C,
            rainy=RAIN_KEYWORD in condition,
            windy=weather.wind_speed > WINDY_SPEED_MS,
            humid=weather.humidity > HUMID_PCT,
            clear=CLEAR_KEYWORD in condition,
        )


def overall_activity(f: WeatherFactors) -> ActivityLevel:
    """General insect activity. Temperature dominates."""
    if f.cold:
        return ActivityLevel.LOW
    if f.hot and f.humid:
        return ActivityLevel.HIGH
    if f.warm and not f.windy and not f.rainy:
        return ActivityLevel.HIGH
    if f.rainy or f.windy:
        return ActivityLevel.LOW
    return ActivityLevel.MODERATE


def flying_activity(f: WeatherFactors) -> ActivityLevel:
    """Activity of flying insects, which wind and rain suppress."""
    if f.windy or f.rainy:
        return ActivityLevel.LOW
    if f.warm and not f.hot:
        return ActivityLevel.HIGH
    return ActivityLevel.MODERATE


def seasonal_activity(season: Season, f: WeatherFactors) -> SeasonalActivity:
    """Activity for the season and the insect groups typical of it."""
    if season is Season.SPRING:
        level = ActivityLevel.HIGH if f.warm and not f.rainy else ActivityLevel.MODERATE
    elif season is Season.SUMMER:
        level = ActivityLevel.HIGH if f.hot and f.humid else ActivityLevel.MODERATE
    elif season is Season.FALL:
        level = ActivityLevel.MODERATE if f.warm else ActivityLevel.LOW
    else:
        level = ActivityLevel.LOW
    return SeasonalActivity(activity=level, insects=list(SEASONAL_INSECTS[season]))


def recommendations(overall: ActivityLevel, season: Season, f: WeatherFactors) -> list[str]:
    """Field advice lines, in rule order."""
    lines: list[str] = []

    if overall is ActivityLevel.HIGH:
        lines.append(ADVICE_HIGH_ACTIVITY)
    elif overall is ActivityLevel.LOW:
        lines.append(ADVICE_LOW_ACTIVITY)

    lines.append(SEASONAL_ADVICE[season])
    if season is Season.SUMMER and f.hot and f.humid:
        lines.append(ADVICE_MOSQUITOES)

    if f.rainy:
        lines.append(ADVICE_RAIN)

    if f.clear and f.warm:
        lines.append(ADVICE_CLEAR_AND_WARM)

    return lines


def predict_insect_activity(
    weather: WeatherReading,
    latitude: float,
    month: int,
) -> InsectActivityPrediction:
    """
    Predict insect activity for a weather reading.

    Pure function of its arguments. Callers at the application boundary pass
    the current month; tests pass a fixed one.

    Args:
        weather: Current weather at the location.
        latitude: Decides the hemisphere (equator counts as northern).
        month: Calendar month, 1-12.

    Returns:
        Overall, flying, and seasonal activity plus recommendations.

    Raises:
        ValueError: If ``month`` is outside 1-12.
    """
    season = resolve_season(month, is_northern_hemisphere(latitude))
    factors = WeatherFactors.from_reading(weather)
    overall = overall_activity(factors)

    return InsectActivityPrediction(
        overall=overall,
        flying=flying_activity(factors),
        seasonal=seasonal_activity(season, factors),
        recommendations=recommendations(overall, season, factors),
    )
