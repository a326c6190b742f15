"""
Session CRUD operations.

Provides read operations for SessionModel beyond the generic base,
including the lookup of sessions still waiting for a timeline.

Dependencies: sqlalchemy, studio.boundary.db.models.session_model
System role: Session persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studio.boundary.db.models.session_model import SessionModel
from studio.boundary.db.models.timeline_entry_model import TimelineEntryModel
from studio.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """CRUD operations for SessionModel."""

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_without_timeline(
        self,
        session: AsyncSession,
        limit: int | None = None,
    ) -> Sequence[SessionModel]:
        """
        Retrieve sessions that have no materialized timeline rows yet.

        Args:
            session: Async database session
            limit: Maximum number of sessions to return

        Returns:
            Sequence of SessionModels ordered by session_date
        """
        has_timeline = (
            select(TimelineEntryModel.id)
            .where(TimelineEntryModel.session_id == SessionModel.id)
            .exists()
        )
        stmt = (
            select(SessionModel)
            .where(~has_timeline)
            .order_by(SessionModel.session_date.asc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


session_crud = SessionCRUD()
