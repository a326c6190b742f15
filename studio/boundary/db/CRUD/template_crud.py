"""
Timeline template CRUD operations.

Provides lookup by session type and an upsert used by template
administration.

Dependencies: sqlalchemy, studio.boundary.db.models.template_model
System role: Template persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studio.boundary.db.models.template_model import TimelineTemplateModel
from studio.boundary.db.CRUD.base_crud import BaseCRUD


class TemplateCRUD(BaseCRUD[TimelineTemplateModel]):
    """
    CRUD operations for TimelineTemplateModel.

    Extends BaseCRUD with session-type keyed queries.
    """

    def __init__(self) -> None:
        """Initialize TemplateCRUD with TimelineTemplateModel."""
        super().__init__(TimelineTemplateModel)

    async def get_by_session_type(
        self,
        session: AsyncSession,
        session_type: str,
    ) -> TimelineTemplateModel | None:
        """
        Retrieve the template configured for a session type.

        Args:
            session: Async database session
            session_type: Session type key

        Returns:
            TimelineTemplateModel if configured, None otherwise
        """
        stmt = select(TimelineTemplateModel).where(
            TimelineTemplateModel.session_type == session_type
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self, session: AsyncSession) -> Sequence[TimelineTemplateModel]:
        """Retrieve every template ordered by session type."""
        stmt = select(TimelineTemplateModel).order_by(TimelineTemplateModel.session_type.asc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def upsert(
        self,
        session: AsyncSession,
        session_type: str,
        tasks: list[dict],
    ) -> TimelineTemplateModel:
        """
        Create or replace the template for a session type.

        Args:
            session: Async database session
            session_type: Session type key
            tasks: Task definitions as JSON-ready dicts

        Returns:
            The created or updated TimelineTemplateModel
        """
        existing = await self.get_by_session_type(session, session_type)
        if existing is None:
            return await self.create(session, session_type=session_type, tasks=tasks)

        existing.tasks = tasks
        await session.flush()
        await session.refresh(existing)
        return existing


template_crud = TemplateCRUD()
