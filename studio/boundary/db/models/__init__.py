"""
Database models package.

Exports:
  - SessionModel: Photo session ORM model
  - TimelineTemplateModel: Per-session-type template ORM model
  - TimelineEntryModel: Materialized timeline task ORM model

Dependencies: sqlalchemy, studio.boundary.db.base
System role: Database model definitions for domain entities
"""

from studio.boundary.db.models.session_model import SessionModel
from studio.boundary.db.models.template_model import TimelineTemplateModel
from studio.boundary.db.models.timeline_entry_model import TimelineEntryModel

__all__ = [
    "SessionModel",
    "TimelineTemplateModel",
    "TimelineEntryModel",
]
