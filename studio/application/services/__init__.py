"""Service orchestrators."""

from .template_cache import CachedTemplateStore, TemplateCache
from .template_service import TemplateService
from .timeline_service import TimelineService

__all__ = [
    "CachedTemplateStore",
    "TemplateCache",
    "TemplateService",
    "TimelineService",
]
