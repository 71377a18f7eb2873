from typing import List

from fastapi import APIRouter, Depends

from weathertunes.core import log_info
from weathertunes.recommendations import RecommendationEngine, list_mood_profiles
from weathertunes.weather import normalize_condition

from ..services import get_engine
from .schemas import MoodProfileInfo, MusicRequest, MusicResponse

router = APIRouter()

_MUSIC_ROUTE_OPTIONS = dict(
    response_model=MusicResponse,
    response_model_exclude_none=True,
    response_model_by_alias=True,
)


# /api/spotify is the legacy path used by older clients.
@router.post("/music", **_MUSIC_ROUTE_OPTIONS)
@router.post("/spotify", **_MUSIC_ROUTE_OPTIONS)
def recommend_music(
    req: MusicRequest,
    engine: RecommendationEngine = Depends(get_engine),
) -> MusicResponse:
    """
    Weather-matched songs. Always answers 200: when Spotify cannot be used
    the curated fallback list is returned with source="fallback".
    """
    raw_condition = req.condition_text()
    condition = normalize_condition(raw_condition)
    if req.city:
        log_info(
            f"Music request for {req.city} ({raw_condition!r} -> {condition.value})",
            component="api",
        )

    result = engine.recommend(condition)
    return MusicResponse.from_result(result)


@router.get("/moods", response_model=List[MoodProfileInfo], response_model_by_alias=True)
def get_moods() -> List[MoodProfileInfo]:
    return [MoodProfileInfo.from_profile(p) for p in list_mood_profiles()]
