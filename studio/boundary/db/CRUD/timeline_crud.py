"""
Timeline entry CRUD operations.

Provides per-session listing, bulk insert, bulk delete, per-task updates
and the pending-task query over session_timelines.

Dependencies: sqlalchemy, studio.boundary.db.models.timeline_entry_model
System role: Materialized timeline persistence operations
"""

from datetime import date
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from studio.boundary.db.models.timeline_entry_model import TimelineEntryModel
from studio.boundary.db.CRUD.base_crud import BaseCRUD
from studio.core.timeline.types import AUTOMATION_OPEN_STATUSES


class TimelineCRUD(BaseCRUD[TimelineEntryModel]):
    """
    CRUD operations for TimelineEntryModel.

    Rows are addressed by (session_id, task_order) rather than by primary key.
    """

    def __init__(self) -> None:
        """Initialize TimelineCRUD with TimelineEntryModel."""
        super().__init__(TimelineEntryModel)

    async def list_for_session(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> Sequence[TimelineEntryModel]:
        """
        Retrieve a session's timeline ordered by task_order.

        Args:
            session: Async database session
            session_id: Owning session UUID

        Returns:
            Sequence of TimelineEntryModels, empty if unmaterialized
        """
        stmt = (
            select(TimelineEntryModel)
            .where(TimelineEntryModel.session_id == session_id)
            .order_by(TimelineEntryModel.task_order.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def bulk_create(
        self,
        session: AsyncSession,
        rows: list[dict],
    ) -> list[TimelineEntryModel]:
        """
        Insert several timeline rows in a single flush.

        Args:
            session: Async database session
            rows: Column values for each TimelineEntryModel

        Returns:
            The created model instances

        Raises:
            IntegrityError: If a (session_id, task_order) pair already exists
        """
        return await self.create_many(session, rows)

    async def delete_for_session(self, session: AsyncSession, session_id: UUID) -> int:
        """
        Delete every timeline row of a session.

        Returns:
            Number of rows deleted
        """
        stmt = delete(TimelineEntryModel).where(TimelineEntryModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.rowcount or 0

    async def get_by_order(
        self,
        session: AsyncSession,
        session_id: UUID,
        task_order: int,
    ) -> TimelineEntryModel | None:
        """Retrieve one timeline row by its session and task order."""
        stmt = select(TimelineEntryModel).where(
            TimelineEntryModel.session_id == session_id,
            TimelineEntryModel.task_order == task_order,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_by_order(
        self,
        session: AsyncSession,
        session_id: UUID,
        task_order: int,
        **values: Any,
    ) -> TimelineEntryModel | None:
        """
        Update columns of one timeline row.

        Args:
            session: Async database session
            session_id: Owning session UUID
            task_order: Order of the row within the timeline
            **values: Column names and new values

        Returns:
            Updated TimelineEntryModel if found, None otherwise
        """
        entry = await self.get_by_order(session, session_id, task_order)
        if entry is None:
            return None

        for column, value in values.items():
            setattr(entry, column, value)
        await session.flush()
        return entry

    async def list_pending(
        self,
        session: AsyncSession,
        session_id: UUID | None = None,
        due_before: date | None = None,
        automatable_only: bool = False,
    ) -> Sequence[TimelineEntryModel]:
        """
        Retrieve incomplete timeline rows, earliest due first.

        A row is due on its adjusted_date when one is set, otherwise on its
        calculated_date.

        Args:
            session: Async database session
            session_id: Restrict to one session when given
            due_before: Only rows due on or before this date when given
            automatable_only: Only rows the automation agent can still act on

        Returns:
            Sequence of TimelineEntryModels ordered by due date, task_order
        """
        due_date = func.coalesce(TimelineEntryModel.adjusted_date, TimelineEntryModel.calculated_date)

        stmt = select(TimelineEntryModel).where(TimelineEntryModel.is_completed.is_(False))
        if session_id is not None:
            stmt = stmt.where(TimelineEntryModel.session_id == session_id)
        if due_before is not None:
            stmt = stmt.where(due_date <= due_before)
        if automatable_only:
            stmt = stmt.where(
                TimelineEntryModel.can_be_automated.is_(True),
                TimelineEntryModel.automation_status.in_(AUTOMATION_OPEN_STATUSES),
            )
        stmt = stmt.order_by(due_date.asc(), TimelineEntryModel.task_order.asc())
        result = await session.execute(stmt)
        return result.scalars().all()


timeline_crud = TimelineCRUD()
