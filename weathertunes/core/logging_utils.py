"""Logging helpers for the service.

Every helper takes an optional `component` ("weather", "spotify",
"recommendations", "api") and logs through the matching child of the
`weathertunes` logger, so provider calls can be told apart in the output and
silenced one at a time:

    logging.getLogger("weathertunes.spotify").setLevel(logging.WARNING)
"""

import logging
from typing import Optional

ROOT_LOGGER_NAME = "weathertunes"

logger = logging.getLogger(ROOT_LOGGER_NAME)


def get_logger(component: Optional[str] = None) -> logging.Logger:
    if not component:
        return logger
    return logger.getChild(component)


def log_section(title: str, component: Optional[str] = None) -> None:
    get_logger(component).info("=== %s ===", title)


def log_info(message: str, component: Optional[str] = None) -> None:
    get_logger(component).info("%s", message)


def log_step(message: str, component: Optional[str] = None) -> None:
    """
    Outbound call or other work in progress.
    """
    get_logger(component).info("→ %s", message)


def log_success(message: str, component: Optional[str] = None) -> None:
    get_logger(component).info("✅ %s", message)


def log_warning(message: str, component: Optional[str] = None) -> None:
    """
    Non-fatal problem, e.g. an upstream failure answered with fallback data.
    """
    get_logger(component).warning("⚠️ %s", message)


def log_error(message: str, component: Optional[str] = None) -> None:
    get_logger(component).error("❌ %s", message)
