"""
Core business logic module.

Contains domain business logic and the exception hierarchy.
Timeline derivation rules reside in core.timeline.
"""

from studio.core.exceptions import (
    StudioPortalException,
    ValidationError,
    SessionNotFoundError,
    TemplateMissingError,
    InvalidTemplateMatchError,
    StorageUnavailableError,
    TimelineConflictError,
    TimelineEntryNotFoundError,
    InvalidTemplateError,
    InvalidAutomationStatusError,
)

__all__ = [
    "StudioPortalException",
    "ValidationError",
    "SessionNotFoundError",
    "TemplateMissingError",
    "InvalidTemplateMatchError",
    "StorageUnavailableError",
    "TimelineConflictError",
    "TimelineEntryNotFoundError",
    "InvalidTemplateError",
    "InvalidAutomationStatusError",
]
