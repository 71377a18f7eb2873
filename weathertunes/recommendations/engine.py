"""Weather-driven Spotify recommendations with a curated safety net.

recommend() never raises: the music panel always has something to show.
Any upstream problem (missing credentials, timeout, rate limiting, empty or
malformed search results) is logged and answered from the fallback library.
Only an authentication failure has a side effect: the token cache is cleared
so the next request re-authenticates instead of reusing a rejected token.
"""

import random
from typing import List, Optional, Sequence, TypeVar

from weathertunes import config
from weathertunes.core import (
    CanonicalCondition,
    RecommendationResult,
    RecommendationSource,
    Track,
    UpstreamAuthError,
    UpstreamError,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from weathertunes.spotify import SpotifyCatalog, SpotifyTokenCache

from .fallback import get_fallback
from .moods import get_mood_profile

T = TypeVar("T")

# Rejection sampling gives up after this many draws per candidate and fills
# the remaining slots in pool order, so a biased random source cannot loop.
MAX_DRAWS_PER_CANDIDATE = 20


def dedupe_tracks(tracks: Sequence[Track]) -> List[Track]:
    """Drop search hits pointing at a catalog id already seen."""
    seen = set()
    unique: List[Track] = []
    for t in tracks:
        key = t.catalog_id or (t.name.lower(), t.artist.lower())
        if key in seen:
            continue
        seen.add(key)
        unique.append(t)
    return unique


def sample_without_replacement(
    pool: Sequence[T], count: int, rng: random.Random
) -> List[T]:
    """
    Pick up to `count` entries of `pool`, never the same index twice.

    Draws uniform random indices and keeps the ones not already accepted,
    until `count` are accepted or the pool is exhausted.
    """
    target = min(count, len(pool))
    accepted: List[int] = []
    draws_left = MAX_DRAWS_PER_CANDIDATE * len(pool)

    while len(accepted) < target and draws_left > 0:
        draws_left -= 1
        index = rng.randrange(len(pool))
        if index not in accepted:
            accepted.append(index)

    for index in range(len(pool)):
        if len(accepted) >= target:
            break
        if index not in accepted:
            accepted.append(index)

    return [pool[i] for i in accepted]


def build_reason(condition: CanonicalCondition, mood_label: str) -> str:
    return f"Fits a {condition.value.lower()} day's {mood_label} vibe"


class RecommendationEngine:
    def __init__(
        self,
        token_cache: SpotifyTokenCache,
        catalog: SpotifyCatalog,
        rng: Optional[random.Random] = None,
        pool_size: Optional[int] = None,
        count: Optional[int] = None,
    ):
        self.token_cache = token_cache
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.pool_size = pool_size or config.SEARCH_POOL_SIZE
        self.count = count or config.RECOMMENDATION_COUNT

    def recommend(self, condition: CanonicalCondition) -> RecommendationResult:
        profile = get_mood_profile(condition)
        condition = profile.condition
        keyword = self.rng.choice(profile.keywords)

        log_step(
            f"Recommending for {condition.value}: query={keyword!r} "
            f"(valence={profile.target_valence}, energy={profile.target_energy})",
            component="recommendations",
        )

        try:
            token = self.token_cache.get_token()
            candidates = self.catalog.search_tracks(token, keyword, limit=self.pool_size)
        except UpstreamAuthError as e:
            log_warning(
                f"Spotify authentication failed ({e.message}), using fallback.",
                component="recommendations",
            )
            self.token_cache.invalidate()
            return get_fallback(condition)
        except UpstreamError as e:
            log_warning(
                f"Spotify unavailable ({e.message}), using fallback.",
                component="recommendations",
            )
            return get_fallback(condition)

        pool = dedupe_tracks(candidates)
        if not pool:
            log_warning(
                f"Spotify returned no tracks for {keyword!r}, using fallback.",
                component="recommendations",
            )
            return get_fallback(condition)

        selected = sample_without_replacement(pool, self.count, self.rng)
        reason = build_reason(condition, profile.mood_label)
        for track in selected:
            track.mood_label = profile.mood_label
            track.reason = reason

        log_success(
            f"{len(selected)} tracks selected from {len(pool)} candidates.",
            component="recommendations",
        )
        log_info(
            ", ".join(f"{t.name} – {t.artist}" for t in selected),
            component="recommendations",
        )
        return RecommendationResult(tracks=selected, source=RecommendationSource.catalog)
