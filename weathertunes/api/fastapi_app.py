from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weathertunes import config
from weathertunes.api.music.routes import router as music_router
from weathertunes.api.services import Services
from weathertunes.api.system.routes import router as system_router
from weathertunes.api.weather.routes import router as weather_router
from weathertunes.core import (
    WeatherTunesError,
    configure_logging,
    log_error,
    log_info,
    log_section,
    log_success,
    log_warning,
)


async def weathertunes_error_handler(request: Request, exc: WeatherTunesError):
    if exc.status_code >= 500:
        log_error(
            f"{request.method} {request.url.path}: {exc.message} ({exc.details})",
            component="api",
        )
    else:
        log_warning(
            f"{request.method} {request.url.path}: {exc.message}",
            component="api",
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg")} for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": details},
    )


def _report_configuration(services: Services) -> None:
    log_section("WeatherTunes API", component="api")
    if services.weather.has_credentials:
        log_success("Weather API: configured", component="api")
    else:
        log_warning(
            "Weather API: WEATHERAPI_KEY missing, /api/weather will fail",
            component="api",
        )

    if services.token_cache.has_credentials:
        log_success("Spotify API: configured", component="api")
    else:
        log_warning(
            "Spotify API: SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET missing, "
            "/api/music will serve fallback tracks",
            component="api",
        )
    log_info(f"Listening on http://{config.HOST}:{config.PORT}", component="api")


def create_app(services: Optional[Services] = None) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    app = FastAPI(
        title="WeatherTunes API",
        version="1.0.0",
        description="Weather reports paired with weather-matched music.",
    )
    app.state.services = services or Services()

    # The chat UI is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WeatherTunesError, weathertunes_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # System routes
    app.include_router(system_router, tags=["system"])

    # Weather & music routes
    app.include_router(weather_router, prefix="/api", tags=["weather"])
    app.include_router(music_router, prefix="/api", tags=["music"])

    _report_configuration(app.state.services)
    return app
