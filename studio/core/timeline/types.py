"""
Timeline domain types.

Plain data containers passed between the timeline core and its storage
collaborators. Independent of the ORM and of the HTTP schemas.

Besides name, offset and order, every task carries the studio's automation
metadata (whether an assistant may perform it, whether its output needs
approval, expected effort). Entries copy that metadata at materialization
and track their own automation status.

Dependencies: dataclasses, enum (stdlib), studio.core.exceptions
System role: Timeline domain vocabulary
"""

import enum
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any
from uuid import UUID

from studio.core.exceptions import ValidationError


class AutomationStatus(str, enum.Enum):
    """
    Automation states of a timeline entry.

    PENDING: Not started, or reopened
    PENDING_APPROVAL: Automated output submitted, waiting for studio review
    COMPLETED: Task done
    """

    PENDING = "pending"
    PENDING_APPROVAL = "pending_approval"
    COMPLETED = "completed"


# States the task automation agent still has to act on
AUTOMATION_OPEN_STATUSES = (AutomationStatus.PENDING, AutomationStatus.PENDING_APPROVAL)


def _required(data: dict, *keys: str) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    raise ValidationError(
        f"Template task is missing '{keys[0]}'",
        field=keys[0],
        details={"task": data},
    )


def _as_int(data: dict, key: str) -> int:
    value = _required(data, key)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Template task '{key}' must be an integer, got {value!r}",
            field=key,
        ) from e


@dataclass(frozen=True)
class TaskDefinition:
    """One task of a timeline template.

    offset_days is relative to the session date: negative means before the
    session, positive after.
    """

    name: str
    offset_days: int
    order: int
    can_be_automated: bool = False
    approval_required: bool = False
    estimated_hours: float | None = None
    requires_photographer: bool = False
    can_be_batched: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "TaskDefinition":
        """Build from a stored template row element.

        Rows written by the legacy portal keyed the name as "task".

        Raises:
            ValidationError: If name, offset_days or order is missing or malformed
        """
        estimated_hours = data.get("estimated_hours")
        return cls(
            name=str(_required(data, "name", "task")),
            offset_days=_as_int(data, "offset_days"),
            order=_as_int(data, "order"),
            can_be_automated=bool(data.get("can_be_automated", False)),
            approval_required=bool(data.get("approval_required", False)),
            estimated_hours=float(estimated_hours) if estimated_hours is not None else None,
            requires_photographer=bool(data.get("requires_photographer", False)),
            can_be_batched=bool(data.get("can_be_batched", False)),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON storage."""
        return {
            "name": self.name,
            "offset_days": self.offset_days,
            "order": self.order,
            "can_be_automated": self.can_be_automated,
            "approval_required": self.approval_required,
            "estimated_hours": self.estimated_hours,
            "requires_photographer": self.requires_photographer,
            "can_be_batched": self.can_be_batched,
        }


def validate_tasks(tasks) -> None:
    """
    Check template task definitions.

    Raises:
        ValidationError: On blank names or duplicate order values
    """
    seen: set[int] = set()
    for task in tasks:
        if not task.name.strip():
            raise ValidationError("Task name must not be blank", field="name")
        if task.order in seen:
            raise ValidationError(
                f"Duplicate task order {task.order}",
                field="order",
                details={"order": task.order},
            )
        seen.add(task.order)


@dataclass(frozen=True)
class TimelineTemplate:
    """Ordered task definitions for one session type."""

    session_type: str
    tasks: tuple[TaskDefinition, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Session:
    """Read-only view of a booked photo session."""

    id: UUID
    session_type: str
    session_date: date
    session_title: str = ""
    client_id: UUID | None = None


@dataclass(frozen=True)
class TimelineEntry:
    """One concrete, dated task of a session timeline."""

    session_id: UUID
    task_name: str
    calculated_date: date
    task_order: int
    completed: bool = False
    completed_date: date | None = None
    can_be_automated: bool = False
    approval_required: bool = False
    estimated_hours: float | None = None
    requires_photographer: bool = False
    can_be_batched: bool = False
    automation_status: AutomationStatus = AutomationStatus.PENDING
    adjusted_date: date | None = None
    completed_by: str | None = None

    @property
    def due_date(self) -> date:
        """Date the task is due: the manual adjustment if any, else the calculated date."""
        return self.adjusted_date or self.calculated_date

    def with_completion(
        self,
        completed: bool,
        completed_date: date | None,
        completed_by: str | None = None,
    ) -> "TimelineEntry":
        """Return a copy with completion state replaced."""
        return replace(
            self,
            completed=completed,
            completed_date=completed_date if completed else None,
            completed_by=completed_by if completed else None,
            automation_status=AutomationStatus.COMPLETED if completed else AutomationStatus.PENDING,
        )

    def to_dict(self) -> dict:
        """Serialize as a plain record with ISO calendar dates."""
        return {
            "task_name": self.task_name,
            "calculated_date": self.calculated_date.isoformat(),
            "task_order": self.task_order,
            "completed": self.completed,
            "completed_date": self.completed_date.isoformat() if self.completed_date else None,
        }
