"""API routers."""

from .epubs import router as epubs_router
from .health import router as health_router

__all__ = ["epubs_router", "health_router"]
