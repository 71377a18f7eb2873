"""Curated tracks served when the Spotify catalog cannot be used."""

from typing import Dict, List, Optional, Tuple

from weathertunes.core import (
    CanonicalCondition,
    RecommendationResult,
    RecommendationSource,
    Track,
)

from .moods import get_mood_profile

# condition -> (name, artist, reason); exactly three per condition
FALLBACK_TRACKS: Dict[CanonicalCondition, Tuple[Tuple[str, str, str], ...]] = {
    CanonicalCondition.sunny: (
        ("Here Comes the Sun", "The Beatles", "Ultimate sunny day song"),
        ("Walking on Sunshine", "Katrina and the Waves", "Feel-good sunshine energy"),
        ("Good Day Sunshine", "The Beatles", "Cheerful sunny vibes"),
    ),
    CanonicalCondition.cloudy: (
        ("Both Sides Now", "Joni Mitchell", "Reflective cloudy mood"),
        ("Cloudbusting", "Kate Bush", "Dreamy atmosphere"),
        ("Dreams", "Fleetwood Mac", "Mellow cloudy day track"),
    ),
    CanonicalCondition.rainy: (
        ("Raindrops Keep Fallin' on My Head", "B.J. Thomas", "Classic rainy day anthem"),
        ("November Rain", "Guns N' Roses", "Epic rain ballad"),
        ("Purple Rain", "Prince", "Iconic rain song"),
    ),
    CanonicalCondition.snowy: (
        ("Let It Snow! Let It Snow! Let It Snow!", "Dean Martin", "Classic winter snow song"),
        ("Winter Wonderland", "Dean Martin", "Joyful snowy scenery"),
        ("The Sound of Silence", "Simon & Garfunkel", "Peaceful snowy atmosphere"),
    ),
}


def fallback_tracks(condition: Optional[CanonicalCondition]) -> List[Track]:
    profile = get_mood_profile(condition)
    return [
        Track(name=name, artist=artist, mood_label=profile.mood_label, reason=reason)
        for name, artist, reason in FALLBACK_TRACKS[profile.condition]
    ]


def get_fallback(condition: Optional[CanonicalCondition]) -> RecommendationResult:
    """
    Curated recommendation for `condition` (Sunny list when unknown).
    A fresh list is built on every call so callers may mutate it.
    """
    return RecommendationResult(
        tracks=fallback_tracks(condition),
        source=RecommendationSource.fallback,
    )
