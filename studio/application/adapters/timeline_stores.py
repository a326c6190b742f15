"""
SQL-backed timeline collaborators.

Implements the SessionStore, TemplateStore and TimelineRepository
protocols over an AsyncSession and the CRUD singletons. Database failures
are translated into StorageUnavailableError; a uniqueness violation on
insert becomes TimelineConflictError. Stored templates that could never be
materialized (malformed tasks, duplicate orders) raise InvalidTemplateError
when read.

Dependencies: sqlalchemy, studio.boundary.db.CRUD, studio.core.timeline
System role: Storage adapters for the timeline service
"""

import logging
from datetime import date
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from studio.boundary.db.CRUD.session_crud import session_crud
from studio.boundary.db.CRUD.template_crud import template_crud
from studio.boundary.db.CRUD.timeline_crud import timeline_crud
from studio.boundary.db.models.template_model import TimelineTemplateModel
from studio.boundary.db.models.timeline_entry_model import TimelineEntryModel
from studio.core.exceptions import (
    InvalidTemplateError,
    StorageUnavailableError,
    TimelineConflictError,
    ValidationError,
)
from studio.core.timeline.types import (
    Session,
    TaskDefinition,
    TimelineEntry,
    TimelineTemplate,
    validate_tasks,
)

logger = logging.getLogger(__name__)

# TimelineEntry field -> TimelineEntryModel column, where the names differ
_ENTRY_COLUMNS = {"completed": "is_completed"}


def template_from_model(model: TimelineTemplateModel) -> TimelineTemplate:
    """
    Convert a template row into the domain template.

    Raises:
        InvalidTemplateError: If a task row is malformed or two tasks share an order
    """
    try:
        tasks = tuple(TaskDefinition.from_dict(task) for task in model.tasks or [])
        validate_tasks(tasks)
    except ValidationError as e:
        logger.error(
            "Stored timeline template is invalid",
            extra={"session_type": model.session_type, "error": e.message},
        )
        raise InvalidTemplateError(
            model.session_type,
            e.message,
            field=e.details.get("field"),
        ) from e
    return TimelineTemplate(session_type=model.session_type, tasks=tasks)


def entry_from_model(model: TimelineEntryModel) -> TimelineEntry:
    """Convert a timeline row into the domain entry."""
    return TimelineEntry(
        session_id=model.session_id,
        task_name=model.task_name,
        calculated_date=model.calculated_date,
        task_order=model.task_order,
        completed=model.is_completed,
        completed_date=model.completed_date,
        can_be_automated=model.can_be_automated,
        approval_required=model.approval_required,
        estimated_hours=model.estimated_hours,
        requires_photographer=model.requires_photographer,
        can_be_batched=model.can_be_batched,
        automation_status=model.automation_status,
        adjusted_date=model.adjusted_date,
        completed_by=model.completed_by,
    )


def _entry_row(session_id: UUID, entry: TimelineEntry) -> dict[str, Any]:
    return {
        "session_id": session_id,
        "task_name": entry.task_name,
        "calculated_date": entry.calculated_date,
        "adjusted_date": entry.adjusted_date,
        "task_order": entry.task_order,
        "is_completed": entry.completed,
        "completed_date": entry.completed_date,
        "completed_by": entry.completed_by,
        "can_be_automated": entry.can_be_automated,
        "approval_required": entry.approval_required,
        "estimated_hours": entry.estimated_hours,
        "requires_photographer": entry.requires_photographer,
        "can_be_batched": entry.can_be_batched,
        "automation_status": entry.automation_status,
    }

class SqlSessionStore:
    """SessionStore over the sessions table."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_session(self, session_id: UUID) -> Session | None:
        try:
            model = await session_crud.get_by_id(self.db, session_id)
        except SQLAlchemyError as e:
            raise StorageUnavailableError(
                f"Failed to load session: {e}",
                operation="get_session",
                details={"session_id": str(session_id)},
            ) from e

        if model is None:
            return None
        return Session(
            id=model.id,
            session_type=model.session_type,
            session_date=model.session_date,
            session_title=model.session_title,
            client_id=model.client_id,
        )


class SqlTemplateStore:
    """TemplateStore over the timeline_templates table."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_template_for_type(self, session_type: str) -> TimelineTemplate | None:
        try:
            model = await template_crud.get_by_session_type(self.db, session_type)
        except SQLAlchemyError as e:
            raise StorageUnavailableError(
                f"Failed to load timeline template: {e}",
                operation="get_template_for_type",
                details={"session_type": session_type},
            ) from e

        return template_from_model(model) if model is not None else None


class SqlTimelineRepository:
    """
    TimelineRepository over the session_timelines table.

    Writes commit their own unit of work. delete_entries only flushes, so a
    delete followed by a failed insert_entries is rolled back together.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_entries(self, session_id: UUID) -> list[TimelineEntry]:
        try:
            rows = await timeline_crud.list_for_session(self.db, session_id)
        except SQLAlchemyError as e:
            raise StorageUnavailableError(
                f"Failed to list timeline entries: {e}",
                operation="list_entries",
                details={"session_id": str(session_id)},
            ) from e
        return [entry_from_model(row) for row in rows]

    async def insert_entries(self, session_id: UUID, entries: Sequence[TimelineEntry]) -> None:
        rows = [_entry_row(session_id, entry) for entry in entries]
        try:
            await timeline_crud.bulk_create(self.db, rows)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise TimelineConflictError(str(session_id)) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageUnavailableError(
                f"Failed to insert timeline entries: {e}",
                operation="insert_entries",
                details={"session_id": str(session_id), "entry_count": len(rows)},
            ) from e

    async def delete_entries(self, session_id: UUID) -> int:
        try:
            return await timeline_crud.delete_for_session(self.db, session_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageUnavailableError(
                f"Failed to delete timeline entries: {e}",
                operation="delete_entries",
                details={"session_id": str(session_id)},
            ) from e

    async def get_entry(self, session_id: UUID, task_order: int) -> TimelineEntry | None:
        try:
            row = await timeline_crud.get_by_order(self.db, session_id, task_order)
        except SQLAlchemyError as e:
            raise StorageUnavailableError(
                f"Failed to load timeline entry: {e}",
                operation="get_entry",
                details={"session_id": str(session_id), "task_order": task_order},
            ) from e
        return entry_from_model(row) if row is not None else None

    async def update_entry(
        self,
        session_id: UUID,
        task_order: int,
        **changes: Any,
    ) -> TimelineEntry | None:
        values = {_ENTRY_COLUMNS.get(name, name): value for name, value in changes.items()}
        try:
            row = await timeline_crud.update_by_order(self.db, session_id, task_order, **values)
            if row is None:
                return None
            entry = entry_from_model(row)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageUnavailableError(
                f"Failed to update timeline entry: {e}",
                operation="update_entry",
                details={"session_id": str(session_id), "task_order": task_order},
            ) from e
        return entry

    async def list_pending(
        self,
        session_id: UUID | None = None,
        due_before: date | None = None,
        automatable_only: bool = False,
    ) -> list[TimelineEntry]:
        try:
            rows = await timeline_crud.list_pending(
                self.db,
                session_id=session_id,
                due_before=due_before,
                automatable_only=automatable_only,
            )
        except SQLAlchemyError as e:
            raise StorageUnavailableError(
                f"Failed to list pending timeline entries: {e}",
                operation="list_pending",
            ) from e
        return [entry_from_model(row) for row in rows]
