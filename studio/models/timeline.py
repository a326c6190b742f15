"""
Timeline domain models and schemas.

Request/response schemas for session timeline operations.

Dependencies: pydantic
System role: Timeline API contracts
"""

import uuid
from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from studio.core.timeline.types import AutomationStatus, TimelineEntry


def _entry_fields(entry: TimelineEntry) -> dict[str, Any]:
    return {
        "task_name": entry.task_name,
        "calculated_date": entry.calculated_date,
        "adjusted_date": entry.adjusted_date,
        "due_date": entry.due_date,
        "task_order": entry.task_order,
        "completed": entry.completed,
        "completed_date": entry.completed_date,
        "completed_by": entry.completed_by,
        "automation_status": entry.automation_status,
        "can_be_automated": entry.can_be_automated,
        "approval_required": entry.approval_required,
        "estimated_hours": entry.estimated_hours,
        "requires_photographer": entry.requires_photographer,
        "can_be_batched": entry.can_be_batched,
    }


class TimelineEntryResponse(BaseModel):
    """One dated task of a session timeline."""

    task_name: str
    calculated_date: date
    adjusted_date: date | None = None
    due_date: date = Field(description="adjusted_date when set, else calculated_date")
    task_order: int
    completed: bool
    completed_date: date | None = None
    completed_by: str | None = None
    automation_status: AutomationStatus = AutomationStatus.PENDING
    can_be_automated: bool = False
    approval_required: bool = False
    estimated_hours: float | None = None
    requires_photographer: bool = False
    can_be_batched: bool = False

    @classmethod
    def from_entry(cls, entry: TimelineEntry) -> "TimelineEntryResponse":
        return cls(**_entry_fields(entry))


class TimelineResponse(BaseModel):
    """Response schema for a session's ordered timeline."""

    session_id: uuid.UUID
    entries: list[TimelineEntryResponse]
    total: int


class PendingTaskResponse(TimelineEntryResponse):
    """Incomplete task with its owning session."""

    session_id: uuid.UUID

    @classmethod
    def from_entry(cls, entry: TimelineEntry) -> "PendingTaskResponse":
        return cls(session_id=entry.session_id, **_entry_fields(entry))


class TaskCompletionRequest(BaseModel):
    """Request schema for completing or reopening a timeline task."""

    completed: bool = Field(description="New completion state")
    completed_date: date | None = Field(
        default=None,
        description="Completion date; defaults to today when completing",
    )
    completed_by: str | None = Field(
        default=None,
        max_length=100,
        description="Who completed the task, e.g. a staff name or 'ai_agent'",
    )


class TaskScheduleRequest(BaseModel):
    """Request schema for overriding a task's due date."""

    adjusted_date: date | None = Field(description="New due date; null restores the calculated date")


class AutomationStatusRequest(BaseModel):
    """Request schema for moving an automatable task between automation states."""

    automation_status: AutomationStatus
