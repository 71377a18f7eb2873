"""Error taxonomy shared by the weather lookup, Spotify layer and HTTP API.

Every error carries the HTTP status the API answers with, so the FastAPI
exception handler can render any of them as ``{"error", "details"}`` without
knowing which component raised it.
"""

from typing import Any, Optional


class WeatherTunesError(Exception):
    status_code: int = 500
    default_message: str = "Unexpected error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details

    def to_dict(self) -> dict:
        return {"error": self.message, "details": self.details}


class ValidationError(WeatherTunesError):
    """Missing or malformed client input."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(WeatherTunesError):
    status_code = 404
    default_message = "Resource not found"


class CityNotFoundError(NotFoundError):
    default_message = "City not found"


class UpstreamError(WeatherTunesError):
    """Unexpected status or payload shape from a third-party provider."""

    status_code = 500
    default_message = "Upstream provider error"


class UpstreamUnavailableError(UpstreamError):
    """Network, DNS or timeout failure while talking to a provider."""

    status_code = 503
    default_message = "Upstream provider unreachable"


class UpstreamAuthError(UpstreamError):
    """The provider rejected our credentials or bearer token."""

    status_code = 401
    default_message = "Upstream provider rejected credentials"


class CredentialsMissingError(UpstreamError):
    """Provider credentials are not configured; no request was attempted."""

    default_message = "Provider credentials are not configured"
