"""Public façade for the weathertunes.weather package.

Condition normalization, free-text city extraction and the WeatherAPI.com
client. Other packages should import from here rather than the submodules.
"""

from .client import WeatherClient, parse_current_weather
from .conditions import DEFAULT_CONDITION, normalize_condition
from .query import extract_city

__all__ = [
    "WeatherClient",
    "parse_current_weather",
    "normalize_condition",
    "DEFAULT_CONDITION",
    "extract_city",
]
