"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - SessionModel, TimelineTemplateModel, TimelineEntryModel: Core domain entities
  - session_crud, template_crud, timeline_crud: CRUD operation singletons

Dependencies: sqlalchemy, studio.configs
System role: Database adapter providing persistent storage for sessions,
timeline templates, and materialized session timelines.
"""

from studio.boundary.db.base import Base, TimestampMixin, UUIDMixin
from studio.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from studio.boundary.db.models.session_model import SessionModel
from studio.boundary.db.models.template_model import TimelineTemplateModel
from studio.boundary.db.models.timeline_entry_model import TimelineEntryModel
from studio.boundary.db.CRUD import (
    BaseCRUD,
    SessionCRUD,
    TemplateCRUD,
    TimelineCRUD,
    session_crud,
    template_crud,
    timeline_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "SessionModel",
    "TimelineTemplateModel",
    "TimelineEntryModel",
    # CRUD classes
    "BaseCRUD",
    "SessionCRUD",
    "TemplateCRUD",
    "TimelineCRUD",
    # CRUD singletons
    "session_crud",
    "template_crud",
    "timeline_crud",
]
