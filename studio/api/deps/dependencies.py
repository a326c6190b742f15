"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: studio.configs, studio.application, studio.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studio.configs import Settings, get_settings
from studio.boundary.db import get_async_db
from studio.application.adapters import (
    SqlSessionStore,
    SqlTemplateStore,
    SqlTimelineRepository,
)
from studio.application.services import (
    CachedTemplateStore,
    TemplateCache,
    TemplateService,
    TimelineService,
)


class ServiceCache:
    """Container for cached process-wide instances."""

    def __init__(self):
        self._template_cache = None

    @property
    def template_cache(self) -> TemplateCache:
        """Get cached template cache."""
        if self._template_cache is None:
            settings = get_settings()
            self._template_cache = TemplateCache(
                ttl_seconds=settings.timeline.template_cache_ttl_seconds,
            )
        return self._template_cache

    def clear(self) -> None:
        """Clear all cached instances."""
        self._template_cache = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_timeline_service(db: AsyncSession = Depends(get_async_db)) -> TimelineService:
    """
    Get timeline service instance.

    Binds the SQL stores to the request's database session and puts the
    process-wide template cache in front of the template store.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        TimelineService: Timeline service instance
    """
    settings = get_settings()
    cache = get_service_cache()
    return TimelineService(
        session_store=SqlSessionStore(db),
        template_store=CachedTemplateStore(SqlTemplateStore(db), cache.template_cache),
        timeline_repository=SqlTimelineRepository(db),
        storage_timeout=settings.timeline.storage_timeout_seconds,
    )


def get_template_service(db: AsyncSession = Depends(get_async_db)) -> TemplateService:
    """
    Get template service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        TemplateService: Template service sharing the template cache
    """
    cache = get_service_cache()
    return TemplateService(db=db, cache=cache.template_cache)
