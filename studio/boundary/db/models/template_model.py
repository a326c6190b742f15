"""
Timeline template ORM model.

Stores the ordered task definitions for one session type as a JSON list
of {name, offset_days, order} objects.

Dependencies: sqlalchemy, studio.boundary.db.base
System role: Template persistence for timeline derivation
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from studio.boundary.db.base import Base, UUIDMixin, TimestampMixin


class TimelineTemplateModel(Base, UUIDMixin, TimestampMixin):
    """
    Timeline template ORM model, one row per session type.

    Attributes:
        id: UUID primary key (auto-generated)
        session_type: Session type this template serves (unique)
        tasks: JSON list of task definitions
    """

    __tablename__ = "timeline_templates"

    session_type: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    tasks: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Task definitions: [{name, offset_days, order}, ...]",
    )
