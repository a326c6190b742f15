"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, studio.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studio.configs import get_settings
from studio.boundary.db import get_async_engine
from studio.observability.logger import configure_logging
from studio.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from studio.api.deps.dependencies import get_service_cache
from .routers import (
    health_router,
    templates_router,
    timeline_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    # Startup
    configure_logging()
    cache = get_service_cache()
    logger.info(
        "Application startup complete",
        extra={"template_cache_ttl_s": cache.template_cache.ttl_seconds},
    )

    yield

    # Shutdown
    cache.clear()
    await get_async_engine().dispose()
    logger.info("Service cache cleared, database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Session timelines for the photography studio client portal",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    if settings.observability.log_requests:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationMiddleware,
        header_name=settings.observability.correlation_header,
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(timeline_router, prefix="/api/v1")
    app.include_router(templates_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "studio.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
