"""
Exception hierarchy for the Studio Portal timeline service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class StudioPortalException(Exception):
    """Base exception for all Studio Portal application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(StudioPortalException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class SessionNotFoundError(StudioPortalException):
    """Raised when a photo session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}", details)


class TemplateMissingError(StudioPortalException):
    """
    Raised when no timeline template is configured for a session type.

    Recoverable: templates may lag behind newly introduced session types,
    so callers render a pending timeline instead of failing hard.
    """

    def __init__(self, session_type: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["session_type"] = session_type
        self.session_type = session_type
        super().__init__(f"No timeline template configured for session type: {session_type}", details)


class InvalidTemplateMatchError(StudioPortalException):
    """Raised when a template is applied to a session of a different type."""

    def __init__(
        self,
        session_type: str,
        template_session_type: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize template mismatch error.

        Args:
            session_type: Type of the session being materialized
            template_session_type: Type the template was defined for
            details: Additional context
        """
        details = details or {}
        details["session_type"] = session_type
        details["template_session_type"] = template_session_type
        super().__init__(
            f"Template for '{template_session_type}' cannot be applied to a '{session_type}' session",
            details,
        )


class StorageUnavailableError(StudioPortalException):
    """Raised when a session, template or timeline storage call fails or times out."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (get_session, insert_entries, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, details)


class TimelineConflictError(StudioPortalException):
    """Raised when timeline rows for a session were already written by another caller."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["session_id"] = session_id
        super().__init__(f"Timeline already materialized for session: {session_id}", details)


class TimelineEntryNotFoundError(StudioPortalException):
    """Raised when a timeline task cannot be found for a session."""

    def __init__(
        self,
        session_id: str,
        task_order: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["session_id"] = session_id
        details["task_order"] = task_order
        super().__init__(
            f"Timeline task {task_order} not found for session: {session_id}",
            details,
        )


class InvalidTemplateError(ValidationError):
    """
    Raised when a stored template cannot be materialized.

    Covers malformed task rows and duplicate task orders, which could never
    be persisted under the (session_id, task_order) uniqueness rule.
    """

    def __init__(
        self,
        session_type: str,
        reason: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["session_type"] = session_type
        self.session_type = session_type
        super().__init__(
            f"Timeline template for '{session_type}' is invalid: {reason}",
            field=field,
            details=details,
        )


class InvalidAutomationStatusError(ValidationError):
    """Raised when a timeline task cannot be moved to the requested automation status."""

    def __init__(self, status: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["status"] = status
        super().__init__(
            f"Invalid automation status for a timeline task: {status}",
            field="automation_status",
            details=details,
        )
