"""
Session ORM model.

Represents a booked photo session. Rows are owned by the booking workflow;
the timeline service only reads them.

Dependencies: sqlalchemy, studio.boundary.db.base
System role: Session persistence for timeline derivation
"""

from datetime import date
from uuid import UUID

from sqlalchemy import Date, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studio.boundary.db.base import Base, UUIDMixin, TimestampMixin


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Session ORM model for a booked photo shoot.

    session_type selects the timeline template; it is an open string so new
    types can be booked before a template exists for them. Cascade delete
    removes the session's timeline rows with it.

    Attributes:
        id: UUID primary key (auto-generated)
        session_type: Template key (e.g. "portrait", "wedding")
        session_date: Calendar date of the shoot
        session_title: Display title shown on the client portal
        client_id: Reference to the booking client (owned elsewhere)
        timeline_entries: TimelineEntryModel rows (cascading delete)

    Relationships:
        timeline_entries: One-to-many with TimelineEntryModel
    """

    __tablename__ = "sessions"

    session_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    session_date: Mapped[date] = mapped_column(Date, nullable=False)
    session_title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    client_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        nullable=True,
        default=None,
        doc="Booking client reference",
    )

    # Relationships
    timeline_entries = relationship(
        "TimelineEntryModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
