"""Hemisphere-relative calendar seasons.

Meteorological seasons (three whole months each). The southern hemisphere
uses the northern table rotated by two seasons.
"""

from __future__ import annotations

from bugwatch.schemas import Season

_NORTHERN_SEASONS: dict[int, Season] = {
    12: Season.WINTER,
    1: Season.WINTER,
    2: Season.WINTER,
    3: Season.SPRING,
    4: Season.SPRING,
    5: Season.SPRING,
    6: Season.SUMMER,
    7: Season.SUMMER,
    8: Season.SUMMER,
    9: Season.FALL,
    10: Season.FALL,
    11: Season.FALL,
}

_OPPOSITE_SEASON: dict[Season, Season] = {
    Season.SPRING: Season.FALL,
    Season.SUMMER: Season.WINTER,
    Season.FALL: Season.SPRING,
    Season.WINTER: Season.SUMMER,
}


def is_northern_hemisphere(latitude: float) -> bool:
    """Return True for latitudes on or north of the equator."""
    return latitude >= 0


def resolve_season(month: int, northern: bool = True) -> Season:
    """
    Map a calendar month to a season for the given hemisphere.

    Args:
        month: Calendar month, 1-12.
        northern: False for the southern hemisphere (seasons inverted).

    Raises:
        ValueError: If ``month`` is not an integer in 1-12.
    """
    if isinstance(month, bool) or not isinstance(month, int) or month not in _NORTHERN_SEASONS:
        msg = f"month must be an integer from 1 to 12, got {month!r}"
        raise ValueError(msg)

    season = _NORTHERN_SEASONS[month]
    return season if northern else _OPPOSITE_SEASON[season]
