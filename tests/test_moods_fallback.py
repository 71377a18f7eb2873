from weathertunes.core import CanonicalCondition, RecommendationSource
from weathertunes.recommendations import (
    DEFAULT_MOOD_PROFILE,
    get_fallback,
    get_mood_profile,
    list_mood_profiles,
)


def test_every_condition_has_a_profile() -> None:
    profiles = list_mood_profiles()

    assert [p.condition for p in profiles] == list(CanonicalCondition)
    for profile in profiles:
        assert profile.keywords
        assert 0.0 <= profile.target_valence <= 1.0
        assert 0.0 <= profile.target_energy <= 1.0


def test_unknown_condition_uses_sunny_profile() -> None:
    assert DEFAULT_MOOD_PROFILE.condition == CanonicalCondition.sunny
    assert get_mood_profile(None) is DEFAULT_MOOD_PROFILE
    assert get_mood_profile("Foggy") is DEFAULT_MOOD_PROFILE
    assert get_mood_profile(CanonicalCondition.rainy).mood_label == "melancholic"


def test_fallback_has_three_curated_tracks_per_condition() -> None:
    for condition in CanonicalCondition:
        result = get_fallback(condition)

        assert result.source == RecommendationSource.fallback
        assert len(result.tracks) == 3
        assert len({(t.name, t.artist) for t in result.tracks}) == 3
        for track in result.tracks:
            assert track.reason
            assert track.mood_label == get_mood_profile(condition).mood_label
            assert track.image_url is None
            assert track.preview_url is None
            assert track.external_url is None


def test_unknown_condition_falls_back_to_sunny_list() -> None:
    names = [t.name for t in get_fallback("Foggy").tracks]

    assert names == [t.name for t in get_fallback(CanonicalCondition.sunny).tracks]
    assert "Here Comes the Sun" in names


def test_fallback_returns_fresh_lists() -> None:
    first = get_fallback(CanonicalCondition.rainy)
    first.tracks[0].reason = "changed"

    assert get_fallback(CanonicalCondition.rainy).tracks[0].reason != "changed"
