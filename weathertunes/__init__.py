"""WeatherTunes: weather reports paired with weather-matched music."""

__version__ = "1.0.0"
