"""HTTP surface of the service (FastAPI)."""

from .fastapi_app import create_app
from .services import Services

__all__ = ["create_app", "Services"]
