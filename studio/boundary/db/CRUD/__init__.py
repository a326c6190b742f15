"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from studio.boundary.db.CRUD import session_crud, template_crud, timeline_crud

    # Use singleton instances
    session = await session_crud.get_by_id(db, session_id)

    # Or instantiate classes directly for custom behavior
    from studio.boundary.db.CRUD import TimelineCRUD
    custom_crud = TimelineCRUD()
"""

from studio.boundary.db.CRUD.base_crud import BaseCRUD
from studio.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from studio.boundary.db.CRUD.template_crud import TemplateCRUD, template_crud
from studio.boundary.db.CRUD.timeline_crud import TimelineCRUD, timeline_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
    "TemplateCRUD",
    "template_crud",
    "TimelineCRUD",
    "timeline_crud",
]
