from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..services import Services, get_services

router = APIRouter()


@router.get("/")
def index() -> dict:
    return {
        "message": "WeatherTunes API is running!",
        "endpoints": {
            "weather": "POST /api/weather - Get weather data for a city",
            "music": "POST /api/music - Get weather-matched music recommendations",
            "spotify": "POST /api/spotify - Legacy alias of /api/music",
            "moods": "GET /api/moods - List weather mood profiles",
            "health": "GET /health - Check API health",
        },
    }


@router.get("/health")
def health(services: Services = Depends(get_services)) -> dict:
    """
    Check both providers live (nothing cached) and report their state:
    "connected", "not configured", "unauthorized" or "unreachable".
    """
    weather_status = services.weather.check_health()
    catalog_status = services.catalog.check_health(services.token_cache)
    healthy = weather_status == "connected" and catalog_status == "connected"

    return {
        "status": "ok" if healthy else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {
            "weatherAPI": weather_status,
            "catalogAPI": catalog_status,
        },
    }
