"""OpenWeatherMap API constants.

API docs: https://openweathermap.org/current
"""

OPENWEATHER_API = "https://api.openweathermap.org/data/2.5"
CURRENT_WEATHER_URL = f"{OPENWEATHER_API}/weather"

# Condition icons, e.g. "01d" -> https://openweathermap.org/img/wn/01d@2x.png
ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"

# Celsius and m/s
UNITS = "metric"


def icon_url(icon: str) -> str:
    """Build the display URL for an OpenWeatherMap icon code."""
    return ICON_URL_TEMPLATE.format(icon=icon)
