"""Insect activity thresholds, seasonal species lists, and field advice.

Static reference data consumed by ``analysis/insect_activity.py``.
"""

from __future__ import annotations

from bugwatch.schemas import Season

# Temperature thresholds (Celsius). All comparisons are strict.
COLD_TEMP_C: float = 10.0
WARM_TEMP_C: float = 15.0
HOT_TEMP_C: float = 28.0

# Wind above this grounds most flying insects (m/s).
WINDY_SPEED_MS: float = 5.0

# Relative humidity (%) above which conditions count as humid.
HUMID_PCT: float = 70.0

# Case-insensitive substrings matched against the free-text weather condition.
RAIN_KEYWORD = "rain"
CLEAR_KEYWORD = "clear"

# Insect groups commonly seen in each season, in display order.
SEASONAL_INSECTS: dict[Season, tuple[str, ...]] = {
    Season.SPRING: ("Butterflies", "Bees", "Ladybugs", "Aphids", "Beetles"),
    Season.SUMMER: ("Mosquitoes", "Flies", "Wasps", "Cicadas", "Dragonflies", "Grasshoppers"),
    Season.FALL: ("Spiders", "Stink Bugs", "Beetles", "Moths", "Crane Flies"),
    Season.WINTER: ("Indoor Pests", "Overwintering Insects", "Some Spiders"),
}

# Recommendation text
ADVICE_HIGH_ACTIVITY = (
    "Great conditions for insect spotting! Bring your camera and observation tools."
)
ADVICE_LOW_ACTIVITY = (
    "Limited insect activity expected. Focus on sheltered areas where insects might take refuge."
)
ADVICE_RAIN = "After rain stops, check wet areas for increased ground insect activity."
ADVICE_CLEAR_AND_WARM = (
    "Clear conditions are perfect for observing flying insects like butterflies and dragonflies."
)
ADVICE_MOSQUITOES = "Higher mosquito activity likely - consider insect repellent."

SEASONAL_ADVICE: dict[Season, str] = {
    Season.SPRING: "Look for pollinators around flowering plants and gardens.",
    Season.SUMMER: "Check near water sources for diverse insect activity.",
    Season.FALL: "Focus on leaf litter and bark for insects preparing for winter.",
    Season.WINTER: "Look under logs, rocks, and in protected areas for overwintering insects.",
}
