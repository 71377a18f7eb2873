"""Static weather → music mood table.

Each canonical condition gets a set of search keywords (one is picked at
random per request so repeated queries for the same weather vary), a mood
label shown to users, and Spotify-style valence/energy targets.
"""

from typing import Dict, List, Optional

from weathertunes.core import CanonicalCondition, MoodProfile

MOOD_PROFILES: Dict[CanonicalCondition, MoodProfile] = {
    CanonicalCondition.sunny: MoodProfile(
        condition=CanonicalCondition.sunny,
        keywords=("summer pop", "feel good hits", "sunshine", "upbeat dance"),
        mood_label="uplifting",
        target_valence=0.8,
        target_energy=0.7,
    ),
    CanonicalCondition.cloudy: MoodProfile(
        condition=CanonicalCondition.cloudy,
        keywords=("indie chill", "lofi beats", "mellow acoustic", "dream pop"),
        mood_label="chill",
        target_valence=0.5,
        target_energy=0.4,
    ),
    CanonicalCondition.rainy: MoodProfile(
        condition=CanonicalCondition.rainy,
        keywords=("rainy day jazz", "acoustic ballads", "melancholy", "cozy coffeehouse"),
        mood_label="melancholic",
        target_valence=0.3,
        target_energy=0.3,
    ),
    CanonicalCondition.snowy: MoodProfile(
        condition=CanonicalCondition.snowy,
        keywords=("winter classical", "ambient", "peaceful piano", "cozy winter"),
        mood_label="peaceful",
        target_valence=0.4,
        target_energy=0.2,
    ),
}

DEFAULT_MOOD_PROFILE = MOOD_PROFILES[CanonicalCondition.sunny]


def get_mood_profile(condition: Optional[CanonicalCondition]) -> MoodProfile:
    """
    Return the mood profile for `condition`; unknown or missing conditions
    get the Sunny profile.
    """
    try:
        return MOOD_PROFILES[CanonicalCondition(condition)]
    except ValueError:
        return DEFAULT_MOOD_PROFILE


def list_mood_profiles() -> List[MoodProfile]:
    return [MOOD_PROFILES[c] for c in CanonicalCondition]
