"""
Timeline collaborator interfaces.

Structural contracts for the stores the timeline service reads from and
writes to. Any storage engine satisfying them can back the service.

Dependencies: typing (stdlib)
System role: Ports between timeline logic and storage
"""

from datetime import date
from typing import Any, Protocol, Sequence
from uuid import UUID

from studio.core.timeline.types import Session, TimelineEntry, TimelineTemplate


class SessionStore(Protocol):
    """Read access to booked sessions."""

    async def get_session(self, session_id: UUID) -> Session | None:
        ...


class TemplateStore(Protocol):
    """Read access to per-session-type timeline templates."""

    async def get_template_for_type(self, session_type: str) -> TimelineTemplate | None:
        ...


class TimelineRepository(Protocol):
    """
    Persistence for materialized timeline entries.

    insert_entries must be all-or-nothing and must raise
    TimelineConflictError when (session_id, task_order) rows already exist.
    """

    async def list_entries(self, session_id: UUID) -> list[TimelineEntry]:
        ...

    async def insert_entries(self, session_id: UUID, entries: Sequence[TimelineEntry]) -> None:
        ...

    async def delete_entries(self, session_id: UUID) -> int:
        ...

    async def get_entry(self, session_id: UUID, task_order: int) -> TimelineEntry | None:
        ...

    async def update_entry(
        self,
        session_id: UUID,
        task_order: int,
        **changes: Any,
    ) -> TimelineEntry | None:
        """Apply field changes (named as on TimelineEntry) to one entry; None if absent."""
        ...

    async def list_pending(
        self,
        session_id: UUID | None = None,
        due_before: date | None = None,
        automatable_only: bool = False,
    ) -> list[TimelineEntry]:
        """Incomplete entries ordered by due date (adjusted date when set), then task order."""
        ...
