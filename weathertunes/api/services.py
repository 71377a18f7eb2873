"""Service container shared by the API routes.

One instance lives on `app.state.services` for the lifetime of the process,
so the Spotify token cache is shared by every request without being a
module-level global. Tests build their own container with fake sessions.
"""

from dataclasses import dataclass, field
from typing import Optional

from fastapi import Request

from weathertunes.recommendations import RecommendationEngine
from weathertunes.spotify import SpotifyCatalog, SpotifyTokenCache
from weathertunes.weather import WeatherClient


@dataclass
class Services:
    weather: WeatherClient = field(default_factory=WeatherClient)
    token_cache: SpotifyTokenCache = field(default_factory=SpotifyTokenCache)
    catalog: SpotifyCatalog = field(default_factory=SpotifyCatalog)
    engine: Optional[RecommendationEngine] = None

    def __post_init__(self) -> None:
        if self.engine is None:
            self.engine = RecommendationEngine(self.token_cache, self.catalog)


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_weather_client(request: Request) -> WeatherClient:
    return get_services(request).weather


def get_engine(request: Request) -> RecommendationEngine:
    return get_services(request).engine
