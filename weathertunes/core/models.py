from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class CanonicalCondition(str, Enum):
    sunny = "Sunny"
    cloudy = "Cloudy"
    rainy = "Rainy"
    snowy = "Snowy"


class RecommendationSource(str, Enum):
    catalog = "catalog"
    fallback = "fallback"


@dataclass
class WeatherRecord:
    """
    Current weather for a city, already normalized.

    - temp_c       : whole degrees Celsius
    - condition    : always one of the canonical conditions
    - wind_kph     : rounded km/h
    - description  : provider's own wording (e.g. "Patchy light drizzle")
    """

    city: str
    temp_c: int
    condition: CanonicalCondition
    humidity_pct: int
    wind_kph: float
    description: str


@dataclass(frozen=True)
class MoodProfile:
    condition: CanonicalCondition
    keywords: Tuple[str, ...]
    mood_label: str
    target_valence: float
    target_energy: float


@dataclass
class Track:
    name: str
    artist: str
    album: Optional[str] = None
    mood_label: Optional[str] = None
    reason: Optional[str] = None
    image_url: Optional[str] = None
    preview_url: Optional[str] = None
    external_uri: Optional[str] = None
    external_url: Optional[str] = None
    # Catalog id, only used to collapse duplicate search hits
    catalog_id: Optional[str] = field(default=None, repr=False)


@dataclass
class TokenState:
    token: str
    expires_at_ms: int


@dataclass
class RecommendationResult:
    tracks: List[Track]
    source: RecommendationSource
