"""
Timeline entry ORM model.

One concrete dated task of a session's timeline. The unique constraint on
(session_id, task_order) makes concurrent first-time materializations
collide instead of duplicating rows.

Dependencies: sqlalchemy, studio.boundary.db.base, studio.core.timeline.types
System role: Materialized timeline persistence
"""

from datetime import date
from uuid import UUID

from sqlalchemy import Boolean, Date, Enum, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studio.boundary.db.base import Base, UUIDMixin, TimestampMixin
from studio.core.timeline.types import AutomationStatus


class TimelineEntryModel(Base, UUIDMixin, TimestampMixin):
    """
    Timeline entry ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Owning session (cascade delete)
        task_name: Task label copied from the template
        calculated_date: Session date plus the task's offset
        adjusted_date: Manual due date override, None when not rescheduled
        task_order: Presentation order copied from the template
        is_completed: Completion flag set by the client portal
        completed_date: Date the task was completed, None while open
        completed_by: Who completed the task (staff member, automation agent)
        can_be_automated, approval_required, estimated_hours,
        requires_photographer, can_be_batched: Copied from the template task
        automation_status: Progress of the automation agent on this task
    """

    __tablename__ = "session_timelines"
    __table_args__ = (
        UniqueConstraint("session_id", "task_order", name="uq_session_timelines_session_order"),
    )

    session_id: Mapped[UUID] = mapped_column(
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    task_name: Mapped[str] = mapped_column(String(255), nullable=False)
    calculated_date: Mapped[date] = mapped_column(Date, nullable=False)
    adjusted_date: Mapped[date | None] = mapped_column(Date, nullable=True, default=None)
    task_order: Mapped[int] = mapped_column(Integer, nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_date: Mapped[date | None] = mapped_column(Date, nullable=True, default=None)
    completed_by: Mapped[str | None] = mapped_column(String(100), nullable=True, default=None)

    can_be_automated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    approval_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    estimated_hours: Mapped[float | None] = mapped_column(Float, nullable=True, default=None)
    requires_photographer: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_be_batched: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    automation_status: Mapped[AutomationStatus] = mapped_column(
        Enum(
            AutomationStatus,
            native_enum=False,
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        nullable=False,
        default=AutomationStatus.PENDING,
    )

    # Relationships
    session = relationship("SessionModel", back_populates="timeline_entries")
