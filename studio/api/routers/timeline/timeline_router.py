"""
Session timeline API endpoints.

Routes:
- GET /sessions/{session_id}/timeline - Get (and on first call materialize) a timeline
- POST /sessions/{session_id}/timeline/regenerate - Rebuild a timeline from its template
- PATCH /sessions/{session_id}/timeline/{task_order} - Complete or reopen a task
- PATCH /sessions/{session_id}/timeline/{task_order}/schedule - Override a task due date
- PATCH /sessions/{session_id}/timeline/{task_order}/automation - Set a task automation status
- GET /timeline/pending - List incomplete tasks across sessions

Dependencies: studio.application.services, studio.models
System role: Session timeline HTTP API
"""

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends

from studio.application.services.timeline_service import TimelineService
from studio.api.deps.dependencies import get_timeline_service
from studio.models.common import ErrorResponse
from studio.models.timeline import (
    AutomationStatusRequest,
    PendingTaskResponse,
    TaskCompletionRequest,
    TaskScheduleRequest,
    TimelineEntryResponse,
    TimelineResponse,
)

from .timeline_error_handling import handle_timeline_errors

logger = logging.getLogger(__name__)

router = APIRouter(tags=["timeline"])

TIMELINE_ERRORS = {
    404: {"model": ErrorResponse, "description": "Session not found"},
    409: {"model": ErrorResponse, "description": "Template missing or invalid, or conflicting timeline write"},
    503: {"model": ErrorResponse, "description": "Storage unavailable, safe to retry"},
}


def _to_response(session_id: UUID, entries) -> TimelineResponse:
    return TimelineResponse(
        session_id=session_id,
        entries=[TimelineEntryResponse.from_entry(entry) for entry in entries],
        total=len(entries),
    )


@router.get(
    "/sessions/{session_id}/timeline",
    response_model=TimelineResponse,
    responses=TIMELINE_ERRORS,
)
@handle_timeline_errors
async def get_timeline(
    session_id: UUID,
    timeline_service: TimelineService = Depends(get_timeline_service),
) -> TimelineResponse:
    """
    Get a session's timeline ordered by task order.

    Args:
        session_id: Session UUID
        timeline_service: Injected TimelineService

    Returns:
        TimelineResponse: Ordered entries

    Raises:
        HTTPException(404): Session not found
        HTTPException(409): No template for the session type
        HTTPException(503): Storage unavailable
    """
    entries = await timeline_service.get_timeline(session_id)
    return _to_response(session_id, entries)


@router.post(
    "/sessions/{session_id}/timeline/regenerate",
    response_model=TimelineResponse,
    responses=TIMELINE_ERRORS,
)
@handle_timeline_errors
async def regenerate_timeline(
    session_id: UUID,
    timeline_service: TimelineService = Depends(get_timeline_service),
) -> TimelineResponse:
    """
    Replace a session's timeline with one computed from its current date and type.

    Completion state of the previous entries is discarded.
    """
    logger.info("Regenerating timeline", extra={"session_id": str(session_id)})
    entries = await timeline_service.regenerate_timeline(session_id)
    return _to_response(session_id, entries)


@router.patch(
    "/sessions/{session_id}/timeline/{task_order}",
    response_model=TimelineEntryResponse,
)
@handle_timeline_errors
async def set_task_completion(
    session_id: UUID,
    task_order: int,
    request: TaskCompletionRequest,
    timeline_service: TimelineService = Depends(get_timeline_service),
) -> TimelineEntryResponse:
    """
    Complete or reopen one timeline task.

    Raises:
        HTTPException(404): Task not found
    """
    entry = await timeline_service.set_task_completion(
        session_id,
        task_order,
        completed=request.completed,
        completed_date=request.completed_date,
        completed_by=request.completed_by,
    )
    return TimelineEntryResponse.from_entry(entry)


@router.patch(
    "/sessions/{session_id}/timeline/{task_order}/schedule",
    response_model=TimelineEntryResponse,
)
@handle_timeline_errors
async def reschedule_task(
    session_id: UUID,
    task_order: int,
    request: TaskScheduleRequest,
    timeline_service: TimelineService = Depends(get_timeline_service),
) -> TimelineEntryResponse:
    """
    Override a task's due date, or restore the calculated date with null.

    Raises:
        HTTPException(404): Task not found
    """
    entry = await timeline_service.reschedule_task(session_id, task_order, request.adjusted_date)
    return TimelineEntryResponse.from_entry(entry)


@router.patch(
    "/sessions/{session_id}/timeline/{task_order}/automation",
    response_model=TimelineEntryResponse,
)
@handle_timeline_errors
async def set_automation_status(
    session_id: UUID,
    task_order: int,
    request: AutomationStatusRequest,
    timeline_service: TimelineService = Depends(get_timeline_service),
) -> TimelineEntryResponse:
    """
    Move an automatable task to pending or pending approval.

    Raises:
        HTTPException(400): Task is not automatable, or status is completed
        HTTPException(404): Task not found
    """
    entry = await timeline_service.set_automation_status(
        session_id,
        task_order,
        request.automation_status,
    )
    return TimelineEntryResponse.from_entry(entry)


@router.get("/timeline/pending", response_model=list[PendingTaskResponse])
@handle_timeline_errors
async def list_pending_tasks(
    session_id: UUID | None = None,
    due_before: date | None = None,
    automatable_only: bool = False,
    timeline_service: TimelineService = Depends(get_timeline_service),
) -> list[PendingTaskResponse]:
    """
    List incomplete tasks, earliest due first.

    With automatable_only, only tasks the automation agent can still act on
    are returned. Due dates honor manual adjustments.
    """
    entries = await timeline_service.list_pending_tasks(
        session_id=session_id,
        due_before=due_before,
        automatable_only=automatable_only,
    )
    return [PendingTaskResponse.from_entry(entry) for entry in entries]
