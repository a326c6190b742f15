"""
Timeline template service.

Administrative access to timeline templates: listing, lookup and
replacement. Replacing a template evicts it from the template cache; it
never touches timelines that were already materialized.

Dependencies: studio.boundary.db.CRUD, studio.application.services.template_cache
System role: Template administration use cases
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from studio.application.adapters.timeline_stores import template_from_model
from studio.application.services.template_cache import TemplateCache
from studio.boundary.db.CRUD.template_crud import template_crud
from studio.core.exceptions import TemplateMissingError
from studio.core.timeline.types import TaskDefinition, TimelineTemplate, validate_tasks

logger = logging.getLogger(__name__)


class TemplateService:
    """Template administration orchestrator."""

    def __init__(self, db: AsyncSession, cache: TemplateCache | None = None) -> None:
        """
        Initialize template service.

        Args:
            db: Async SQLAlchemy session
            cache: Template cache to invalidate on writes
        """
        self.db = db
        self.cache = cache

    async def list_templates(self) -> list[TimelineTemplate]:
        """Get every configured template ordered by session type."""
        models = await template_crud.list_all(self.db)
        return [template_from_model(model) for model in models]

    async def get_template(self, session_type: str) -> TimelineTemplate:
        """
        Get the template for a session type.

        Raises:
            TemplateMissingError: If none is configured
        """
        model = await template_crud.get_by_session_type(self.db, session_type)
        if model is None:
            raise TemplateMissingError(session_type)
        return template_from_model(model)

    async def upsert_template(
        self,
        session_type: str,
        tasks: list[TaskDefinition],
    ) -> TimelineTemplate:
        """
        Create or replace the template for a session type.

        Args:
            session_type: Session type key
            tasks: Task definitions; order values must be unique

        Returns:
            TimelineTemplate: Stored template

        Raises:
            ValidationError: If the task list is invalid
        """
        validate_tasks(tasks)

        model = await template_crud.upsert(
            self.db,
            session_type=session_type,
            tasks=[task.to_dict() for task in tasks],
        )
        await self.db.commit()

        if self.cache is not None:
            self.cache.invalidate(session_type)

        logger.info(
            "Timeline template saved",
            extra={"session_type": session_type, "task_count": len(tasks)},
        )
        return template_from_model(model)
