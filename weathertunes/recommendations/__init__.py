"""Public façade for the weathertunes.recommendations package.

Mood profiles, the curated fallback library and the recommendation engine.
"""

from .engine import (
    RecommendationEngine,
    build_reason,
    dedupe_tracks,
    sample_without_replacement,
)
from .fallback import FALLBACK_TRACKS, fallback_tracks, get_fallback
from .moods import (
    DEFAULT_MOOD_PROFILE,
    MOOD_PROFILES,
    get_mood_profile,
    list_mood_profiles,
)

__all__ = [
    "RecommendationEngine",
    "build_reason",
    "dedupe_tracks",
    "sample_without_replacement",
    "FALLBACK_TRACKS",
    "fallback_tracks",
    "get_fallback",
    "MOOD_PROFILES",
    "DEFAULT_MOOD_PROFILE",
    "get_mood_profile",
    "list_mood_profiles",
]
