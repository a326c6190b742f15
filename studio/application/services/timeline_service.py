"""
Timeline service orchestrator.

Derives, persists and serves session timelines. A session is either
unmaterialized (no rows) or materialized; the first get_timeline call
materializes it from the template for the session's type, later calls only
read. regenerate_timeline replaces the rows explicitly.

Dependencies: studio.core.timeline, studio.core.exceptions
System role: Timeline use case orchestration
"""

import asyncio
import logging
from datetime import date
from typing import Awaitable, TypeVar
from uuid import UUID

from studio.core.exceptions import (
    InvalidAutomationStatusError,
    SessionNotFoundError,
    StorageUnavailableError,
    TemplateMissingError,
    TimelineConflictError,
    TimelineEntryNotFoundError,
)
from studio.core.timeline.interfaces import SessionStore, TemplateStore, TimelineRepository
from studio.core.timeline.materializer import materialize
from studio.core.timeline.types import AutomationStatus, TimelineEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimelineService:
    """Timeline service orchestrator."""

    def __init__(
        self,
        session_store: SessionStore,
        template_store: TemplateStore,
        timeline_repository: TimelineRepository,
        storage_timeout: float = 5.0,
    ) -> None:
        """
        Initialize timeline service with its storage collaborators.

        Args:
            session_store: Source of booked sessions
            template_store: Source of per-type timeline templates
            timeline_repository: Persistence for materialized entries
            storage_timeout: Seconds allowed for each collaborator call
        """
        self.session_store = session_store
        self.template_store = template_store
        self.timeline_repository = timeline_repository
        self.storage_timeout = storage_timeout

    async def _call(self, operation: str, awaitable: Awaitable[T]) -> T:
        """Await a collaborator call, converting a timeout into StorageUnavailableError."""
        try:
            return await asyncio.wait_for(awaitable, timeout=self.storage_timeout)
        except asyncio.TimeoutError as e:
            logger.error(
                "Storage call timed out",
                extra={"operation": operation, "timeout_s": self.storage_timeout},
            )
            raise StorageUnavailableError(
                f"Storage call timed out after {self.storage_timeout}s",
                operation=operation,
            ) from e

    async def _build_entries(self, session_id: UUID) -> list[TimelineEntry]:
        """
        Load the session and its template and materialize entries in memory.

        Raises:
            SessionNotFoundError: If the session does not exist
            TemplateMissingError: If no template exists for the session type
        """
        session = await self._call("get_session", self.session_store.get_session(session_id))
        if session is None:
            raise SessionNotFoundError(str(session_id))

        template = await self._call(
            "get_template_for_type",
            self.template_store.get_template_for_type(session.session_type),
        )
        if template is None:
            logger.warning(
                "No timeline template for session type",
                extra={"session_id": str(session_id), "session_type": session.session_type},
            )
            raise TemplateMissingError(session.session_type)

        return materialize(session, template)

    async def _persist(self, session_id: UUID, entries: list[TimelineEntry]) -> list[TimelineEntry]:
        """
        Insert a first-time timeline; if another caller won the race, return its rows.

        A conflict with nothing persisted afterwards was not a race (the batch
        collided with itself) and is re-raised.

        Raises:
            TimelineConflictError: If the insert conflicted and no rows exist
        """
        try:
            await self._call(
                "insert_entries",
                self.timeline_repository.insert_entries(session_id, entries),
            )
        except TimelineConflictError:
            persisted = await self._list_ordered(session_id)
            if not persisted:
                logger.error(
                    "Timeline insert conflicted but no rows were persisted",
                    extra={"session_id": str(session_id), "entry_count": len(entries)},
                )
                raise
            logger.info(
                "Timeline materialized concurrently, reusing persisted rows",
                extra={"session_id": str(session_id)},
            )
            return persisted
        return entries

    async def _list_ordered(self, session_id: UUID) -> list[TimelineEntry]:
        """Read a session's persisted entries sorted by task_order."""
        entries = await self._call(
            "list_entries",
            self.timeline_repository.list_entries(session_id),
        )
        return sorted(entries, key=lambda entry: entry.task_order)

    async def _update(self, session_id: UUID, task_order: int, **changes) -> TimelineEntry:
        """Apply changes to one entry, raising TimelineEntryNotFoundError if it is absent."""
        entry = await self._call(
            "update_entry",
            self.timeline_repository.update_entry(session_id, task_order, **changes),
        )
        if entry is None:
            raise TimelineEntryNotFoundError(str(session_id), task_order)
        return entry

    async def get_timeline(self, session_id: UUID) -> list[TimelineEntry]:
        """
        Get a session's timeline, materializing it on first request.

        Args:
            session_id: Session UUID

        Returns:
            list[TimelineEntry]: Entries ordered by task_order

        Raises:
            SessionNotFoundError: If session not found
            TemplateMissingError: If the session type has no template
            InvalidTemplateMatchError: If the template store returned a foreign template
            InvalidTemplateError: If the stored template cannot be materialized
            TimelineConflictError: If the insert conflicted and nothing was persisted
            StorageUnavailableError: If a storage call fails or times out
        """
        entries = await self._list_ordered(session_id)
        if entries:
            return entries

        entries = await self._build_entries(session_id)
        persisted = await self._persist(session_id, entries)
        logger.info(
            "Timeline materialized",
            extra={"session_id": str(session_id), "entry_count": len(persisted)},
        )
        return persisted

    async def regenerate_timeline(self, session_id: UUID) -> list[TimelineEntry]:
        """
        Rebuild a session's timeline from its current date and type.

        Full replace: completion state of the previous entries is discarded.
        The template is resolved before anything is deleted. An insert conflict
        is never reused here: it surfaces as TimelineConflictError and the
        repository rolls the delete back, leaving the previous timeline intact.

        Args:
            session_id: Session UUID

        Returns:
            list[TimelineEntry]: Fresh entries ordered by task_order

        Raises:
            SessionNotFoundError: If session not found
            TemplateMissingError: If the session type has no template
            InvalidTemplateError: If the stored template cannot be materialized
            TimelineConflictError: If the new rows collide with persisted ones
            StorageUnavailableError: If a storage call fails or times out
        """
        entries = await self._build_entries(session_id)
        deleted = await self._call(
            "delete_entries",
            self.timeline_repository.delete_entries(session_id),
        )
        await self._call(
            "insert_entries",
            self.timeline_repository.insert_entries(session_id, entries),
        )
        logger.info(
            "Timeline regenerated",
            extra={
                "session_id": str(session_id),
                "deleted_count": deleted,
                "entry_count": len(entries),
            },
        )
        return entries

    async def set_task_completion(
        self,
        session_id: UUID,
        task_order: int,
        completed: bool,
        completed_date: date | None = None,
        completed_by: str | None = None,
    ) -> TimelineEntry:
        """
        Mark a timeline task as done or reopen it.

        Completing moves the automation status to completed; reopening clears
        the completion date and author and moves it back to pending.

        Args:
            session_id: Session UUID
            task_order: Order of the task within the timeline
            completed: New completion flag
            completed_date: Completion date (defaults to today when completing)
            completed_by: Who completed the task

        Returns:
            TimelineEntry: Updated entry

        Raises:
            TimelineEntryNotFoundError: If the task does not exist
            StorageUnavailableError: If a storage call fails or times out
        """
        if completed:
            changes = {
                "completed": True,
                "completed_date": completed_date or date.today(),
                "completed_by": completed_by,
                "automation_status": AutomationStatus.COMPLETED,
            }
        else:
            changes = {
                "completed": False,
                "completed_date": None,
                "completed_by": None,
                "automation_status": AutomationStatus.PENDING,
            }
        return await self._update(session_id, task_order, **changes)

    async def reschedule_task(
        self,
        session_id: UUID,
        task_order: int,
        adjusted_date: date | None,
    ) -> TimelineEntry:
        """
        Override a task's due date, or clear the override with None.

        The calculated date is kept; regeneration discards the override.

        Raises:
            TimelineEntryNotFoundError: If the task does not exist
        """
        return await self._update(session_id, task_order, adjusted_date=adjusted_date)

    async def set_automation_status(
        self,
        session_id: UUID,
        task_order: int,
        status: AutomationStatus | str,
    ) -> TimelineEntry:
        """
        Move an automatable task between pending and pending approval.

        Completion goes through set_task_completion.

        Args:
            session_id: Session UUID
            task_order: Order of the task within the timeline
            status: pending or pending_approval

        Returns:
            TimelineEntry: Updated entry

        Raises:
            InvalidAutomationStatusError: Unknown or completed status, or a
                task that cannot be automated
            TimelineEntryNotFoundError: If the task does not exist
        """
        try:
            status = AutomationStatus(status)
        except ValueError as e:
            raise InvalidAutomationStatusError(str(status)) from e
        if status is AutomationStatus.COMPLETED:
            raise InvalidAutomationStatusError(status.value)

        entry = await self._call(
            "get_entry",
            self.timeline_repository.get_entry(session_id, task_order),
        )
        if entry is None:
            raise TimelineEntryNotFoundError(str(session_id), task_order)
        if not entry.can_be_automated or entry.completed:
            raise InvalidAutomationStatusError(
                status.value,
                details={"task_order": task_order, "can_be_automated": entry.can_be_automated},
            )

        return await self._update(session_id, task_order, automation_status=status)

    async def list_pending_tasks(
        self,
        session_id: UUID | None = None,
        due_before: date | None = None,
        automatable_only: bool = False,
    ) -> list[TimelineEntry]:
        """
        List incomplete tasks, earliest due first.

        A task is due on its adjusted date when one is set.

        Args:
            session_id: Restrict to one session when given
            due_before: Only tasks due on or before this date when given
            automatable_only: Only tasks the automation agent can still act on
                (automatable, status pending or pending approval)

        Returns:
            list[TimelineEntry]: Pending entries ordered by due date, then task order
        """
        return await self._call(
            "list_pending",
            self.timeline_repository.list_pending(
                session_id=session_id,
                due_before=due_before,
                automatable_only=automatable_only,
            ),
        )
