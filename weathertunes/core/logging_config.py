import logging
import sys

# Third-party loggers that are too chatty at INFO for a request-serving process
_NOISY_LOGGERS = ("urllib3", "httpx", "httpcore")

# uvicorn installs its own handlers; route them through ours instead
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logging for the WeatherTunes API.

    - One stdout handler on the root logger, shared by uvicorn
    - Component loggers ("weathertunes.weather", "weathertunes.spotify", ...)
      show up in the logger-name column
    - HTTP client libraries are capped at WARNING
    """
    root = logging.getLogger()

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    for name in _UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    # create_app() may run several times per process (tests, reload)
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root.addHandler(handler)
    root.setLevel(level)
