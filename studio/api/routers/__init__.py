"""API routers."""

from .health import router as health_router
from .templates import router as templates_router
from .timeline import router as timeline_router

__all__ = [
    "health_router",
    "templates_router",
    "timeline_router",
]
