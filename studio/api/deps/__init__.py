"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_service_cache,
    get_settings_dependency,
    get_template_service,
    get_timeline_service,
)

__all__ = [
    "get_service_cache",
    "get_settings_dependency",
    "get_template_service",
    "get_timeline_service",
]
