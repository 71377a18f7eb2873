from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from weathertunes.core import (
    MoodProfile,
    RecommendationResult,
    RecommendationSource,
    Track,
)


DEFAULT_CONDITION_TEXT = "Sunny"


class MusicRequest(BaseModel):
    # Clients send loosely typed values (numbers, "18°C", null); all are normalized
    condition: Any = None
    city: Any = None
    temp: Any = None
    description: Any = None

    def condition_text(self) -> str:
        if self.condition is None:
            return DEFAULT_CONDITION_TEXT
        return str(self.condition)


class TrackInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    artist: str
    album: Optional[str] = None
    mood_label: Optional[str] = None
    reason: Optional[str] = None
    image_url: Optional[str] = None
    preview_url: Optional[str] = None
    external_uri: Optional[str] = None
    external_url: Optional[str] = None

    @classmethod
    def from_track(cls, track: Track) -> "TrackInfo":
        return cls(
            name=track.name,
            artist=track.artist,
            album=track.album,
            mood_label=track.mood_label,
            reason=track.reason,
            image_url=track.image_url,
            preview_url=track.preview_url,
            external_uri=track.external_uri,
            external_url=track.external_url,
        )


class MusicResponse(BaseModel):
    songs: List[TrackInfo]
    source: RecommendationSource

    @classmethod
    def from_result(cls, result: RecommendationResult) -> "MusicResponse":
        return cls(
            songs=[TrackInfo.from_track(t) for t in result.tracks],
            source=result.source,
        )


class MoodProfileInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    condition: str
    keywords: List[str]
    mood_label: str
    target_valence: float
    target_energy: float

    @classmethod
    def from_profile(cls, profile: MoodProfile) -> "MoodProfileInfo":
        return cls(
            condition=profile.condition.value,
            keywords=list(profile.keywords),
            mood_label=profile.mood_label,
            target_valence=profile.target_valence,
            target_energy=profile.target_energy,
        )
