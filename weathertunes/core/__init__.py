"""Public façade for the weathertunes.core package.

This module exposes logging helpers, the error taxonomy, and base models that
are safe to import from other packages. Callers should import these
cross-cutting concerns from this façade instead of the internal submodules.
"""

from .errors import (
    CityNotFoundError,
    CredentialsMissingError,
    NotFoundError,
    UpstreamAuthError,
    UpstreamError,
    UpstreamUnavailableError,
    ValidationError,
    WeatherTunesError,
)
from .logging_config import configure_logging
from .logging_utils import (
    get_logger,
    log_error,
    log_info,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from .models import (
    CanonicalCondition,
    MoodProfile,
    RecommendationResult,
    RecommendationSource,
    TokenState,
    Track,
    WeatherRecord,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "log_section",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "WeatherTunesError",
    "ValidationError",
    "NotFoundError",
    "CityNotFoundError",
    "UpstreamError",
    "UpstreamUnavailableError",
    "UpstreamAuthError",
    "CredentialsMissingError",
    "CanonicalCondition",
    "RecommendationSource",
    "WeatherRecord",
    "MoodProfile",
    "Track",
    "TokenState",
    "RecommendationResult",
]
