import pytest
from datetime import date
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
from uuid import uuid4

from studio.api.main import create_app
from studio.api.deps.dependencies import get_timeline_service
from studio.core.exceptions import (
    InvalidAutomationStatusError,
    InvalidTemplateError,
    InvalidTemplateMatchError,
    SessionNotFoundError,
    StorageUnavailableError,
    TemplateMissingError,
    TimelineConflictError,
    TimelineEntryNotFoundError,
)
from studio.core.timeline.types import AutomationStatus, TimelineEntry


@pytest.fixture
def mock_timeline_service():
    return AsyncMock()


@pytest.fixture
def client(mock_timeline_service):
    app = create_app()
    app.dependency_overrides[get_timeline_service] = lambda: mock_timeline_service
    return TestClient(app)


def _entries(session_id):
    return [
        TimelineEntry(session_id, "Book venue", date(2024, 5, 16), 1),
        TimelineEntry(session_id, "Send reminder", date(2024, 6, 8), 2),
        TimelineEntry(session_id, "Deliver gallery", date(2024, 6, 29), 3),
    ]


def test_get_timeline(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.get_timeline.return_value = _entries(session_id)

    response = client.get(f"/api/v1/sessions/{session_id}/timeline")

    assert response.status_code == 200
    data = response.json()
    assert data["session_id"] == str(session_id)
    assert data["total"] == 3
    assert data["entries"][0] == {
        "task_name": "Book venue",
        "calculated_date": "2024-05-16",
        "adjusted_date": None,
        "due_date": "2024-05-16",
        "task_order": 1,
        "completed": False,
        "completed_date": None,
        "completed_by": None,
        "automation_status": "pending",
        "can_be_automated": False,
        "approval_required": False,
        "estimated_hours": None,
        "requires_photographer": False,
        "can_be_batched": False,
    }
    assert [entry["task_order"] for entry in data["entries"]] == [1, 2, 3]
    mock_timeline_service.get_timeline.assert_called_once_with(session_id)


def test_get_timeline_session_not_found(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.get_timeline.side_effect = SessionNotFoundError(session_id)

    response = client.get(f"/api/v1/sessions/{session_id}/timeline")

    assert response.status_code == 404


def test_get_timeline_template_missing(client, mock_timeline_service):
    mock_timeline_service.get_timeline.side_effect = TemplateMissingError("Newborn Session")

    response = client.get(f"/api/v1/sessions/{uuid4()}/timeline")

    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["error"] == "template_missing"
    assert detail["session_type"] == "Newborn Session"


def test_get_timeline_storage_unavailable(client, mock_timeline_service):
    mock_timeline_service.get_timeline.side_effect = StorageUnavailableError(
        "Timed out", operation="list_entries"
    )

    response = client.get(f"/api/v1/sessions/{uuid4()}/timeline")

    assert response.status_code == 503


def test_get_timeline_template_mismatch(client, mock_timeline_service):
    mock_timeline_service.get_timeline.side_effect = InvalidTemplateMatchError("portrait", "family")

    response = client.get(f"/api/v1/sessions/{uuid4()}/timeline")

    assert response.status_code == 500


def test_get_timeline_unexpected_error(client, mock_timeline_service):
    mock_timeline_service.get_timeline.side_effect = RuntimeError("boom")

    response = client.get(f"/api/v1/sessions/{uuid4()}/timeline")

    assert response.status_code == 500
    assert "boom" not in response.text


def test_get_timeline_invalid_uuid(client, mock_timeline_service):
    response = client.get("/api/v1/sessions/not-a-uuid/timeline")

    assert response.status_code == 422
    mock_timeline_service.get_timeline.assert_not_called()


def test_regenerate_timeline(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.regenerate_timeline.return_value = _entries(session_id)

    response = client.post(f"/api/v1/sessions/{session_id}/timeline/regenerate")

    assert response.status_code == 200
    assert response.json()["total"] == 3
    mock_timeline_service.regenerate_timeline.assert_called_once_with(session_id)


def test_complete_task(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.set_task_completion.return_value = TimelineEntry(
        session_id, "Send reminder", date(2024, 6, 8), 2, True, date(2024, 6, 7)
    )

    response = client.patch(
        f"/api/v1/sessions/{session_id}/timeline/2",
        json={"completed": True, "completed_date": "2024-06-07"},
    )

    assert response.status_code == 200
    assert response.json()["completed"] is True
    assert response.json()["completed_date"] == "2024-06-07"
    mock_timeline_service.set_task_completion.assert_called_once_with(
        session_id, 2, completed=True, completed_date=date(2024, 6, 7), completed_by=None
    )


def test_complete_unknown_task(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.set_task_completion.side_effect = TimelineEntryNotFoundError(session_id, 9)

    response = client.patch(f"/api/v1/sessions/{session_id}/timeline/9", json={"completed": True})

    assert response.status_code == 404


def test_list_pending_tasks(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.list_pending_tasks.return_value = _entries(session_id)[1:]

    response = client.get("/api/v1/timeline/pending", params={"due_before": "2024-07-01"})

    assert response.status_code == 200
    data = response.json()
    assert [task["task_name"] for task in data] == ["Send reminder", "Deliver gallery"]
    assert data[0]["session_id"] == str(session_id)
    mock_timeline_service.list_pending_tasks.assert_called_once_with(
        session_id=None, due_before=date(2024, 7, 1), automatable_only=False
    )


def test_complete_task_records_author(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.set_task_completion.return_value = TimelineEntry(
        session_id,
        "Send reminder",
        date(2024, 6, 8),
        2,
        True,
        date(2024, 6, 7),
        automation_status=AutomationStatus.COMPLETED,
        completed_by="ai_agent",
    )

    response = client.patch(
        f"/api/v1/sessions/{session_id}/timeline/2",
        json={"completed": True, "completed_date": "2024-06-07", "completed_by": "ai_agent"},
    )

    assert response.status_code == 200
    assert response.json()["completed_by"] == "ai_agent"
    assert response.json()["automation_status"] == "completed"
    mock_timeline_service.set_task_completion.assert_called_once_with(
        session_id, 2, completed=True, completed_date=date(2024, 6, 7), completed_by="ai_agent"
    )


def test_get_timeline_template_invalid(client, mock_timeline_service):
    mock_timeline_service.get_timeline.side_effect = InvalidTemplateError(
        "Family Session", "Duplicate task order 1", field="order"
    )

    response = client.get(f"/api/v1/sessions/{uuid4()}/timeline")

    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["error"] == "template_invalid"
    assert detail["session_type"] == "Family Session"


def test_regenerate_timeline_conflict(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.regenerate_timeline.side_effect = TimelineConflictError(str(session_id))

    response = client.post(f"/api/v1/sessions/{session_id}/timeline/regenerate")

    assert response.status_code == 409
    assert response.json()["detail"]["error"] == "timeline_conflict"


def test_reschedule_task(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.reschedule_task.return_value = TimelineEntry(
        session_id, "Send reminder", date(2024, 6, 8), 2, adjusted_date=date(2024, 6, 10)
    )

    response = client.patch(
        f"/api/v1/sessions/{session_id}/timeline/2/schedule",
        json={"adjusted_date": "2024-06-10"},
    )

    assert response.status_code == 200
    assert response.json()["calculated_date"] == "2024-06-08"
    assert response.json()["due_date"] == "2024-06-10"
    mock_timeline_service.reschedule_task.assert_called_once_with(session_id, 2, date(2024, 6, 10))


def test_reschedule_task_clears_adjustment(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.reschedule_task.return_value = TimelineEntry(
        session_id, "Send reminder", date(2024, 6, 8), 2
    )

    response = client.patch(
        f"/api/v1/sessions/{session_id}/timeline/2/schedule",
        json={"adjusted_date": None},
    )

    assert response.status_code == 200
    assert response.json()["due_date"] == "2024-06-08"
    mock_timeline_service.reschedule_task.assert_called_once_with(session_id, 2, None)


def test_set_automation_status(client, mock_timeline_service):
    session_id = uuid4()
    mock_timeline_service.set_automation_status.return_value = TimelineEntry(
        session_id,
        "Send reminder",
        date(2024, 6, 8),
        2,
        can_be_automated=True,
        automation_status=AutomationStatus.PENDING_APPROVAL,
    )

    response = client.patch(
        f"/api/v1/sessions/{session_id}/timeline/2/automation",
        json={"automation_status": "pending_approval"},
    )

    assert response.status_code == 200
    assert response.json()["automation_status"] == "pending_approval"
    mock_timeline_service.set_automation_status.assert_called_once_with(
        session_id, 2, AutomationStatus.PENDING_APPROVAL
    )


def test_set_automation_status_rejected(client, mock_timeline_service):
    mock_timeline_service.set_automation_status.side_effect = InvalidAutomationStatusError(
        "pending_approval", details={"reason": "Task cannot be automated"}
    )

    response = client.patch(
        f"/api/v1/sessions/{uuid4()}/timeline/1/automation",
        json={"automation_status": "pending_approval"},
    )

    assert response.status_code == 400


def test_set_automation_status_unknown_value(client, mock_timeline_service):
    response = client.patch(
        f"/api/v1/sessions/{uuid4()}/timeline/1/automation",
        json={"automation_status": "running"},
    )

    assert response.status_code == 422
    mock_timeline_service.set_automation_status.assert_not_called()


def test_list_automatable_pending_tasks(client, mock_timeline_service):
    mock_timeline_service.list_pending_tasks.return_value = []

    response = client.get("/api/v1/timeline/pending", params={"automatable_only": "true"})

    assert response.status_code == 200
    assert response.json() == []
    mock_timeline_service.list_pending_tasks.assert_called_once_with(
        session_id=None, due_before=None, automatable_only=True
    )
