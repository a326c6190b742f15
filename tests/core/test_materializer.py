"""
Test suite for the timeline materializer.

Covers the portrait scenario, ordering with non-contiguous and tied
orders, and template/session type mismatch.

System role: Verification of template to timeline transformation
"""

import uuid
from datetime import date

import pytest

from studio.core.exceptions import InvalidTemplateMatchError
from studio.core.timeline.materializer import materialize
from studio.core.timeline.types import AutomationStatus, Session, TaskDefinition, TimelineTemplate


class TestMaterialize:
    """Test suite for materialize()."""

    def test_portrait_scenario_should_produce_expected_dates(
        self,
        portrait_session: Session,
        portrait_template: TimelineTemplate,
    ) -> None:
        entries = materialize(portrait_session, portrait_template)

        assert [(e.task_name, e.calculated_date, e.task_order) for e in entries] == [
            ("Book venue", date(2024, 5, 16), 1),
            ("Send reminder", date(2024, 6, 8), 2),
            ("Deliver gallery", date(2024, 6, 29), 3),
        ]

    def test_entries_should_start_uncompleted(
        self,
        portrait_session: Session,
        portrait_template: TimelineTemplate,
    ) -> None:
        entries = materialize(portrait_session, portrait_template)

        assert all(entry.session_id == portrait_session.id for entry in entries)
        assert all(entry.completed is False for entry in entries)
        assert all(entry.completed_date is None for entry in entries)

    def test_should_sort_by_order_not_template_position(self, portrait_session: Session) -> None:
        template = TimelineTemplate(
            session_type="portrait",
            tasks=(
                TaskDefinition(name="Deliver", offset_days=10, order=30),
                TaskDefinition(name="Confirm", offset_days=-10, order=5),
                TaskDefinition(name="Shoot", offset_days=0, order=12),
            ),
        )

        entries = materialize(portrait_session, template)

        assert [entry.task_order for entry in entries] == [5, 12, 30]
        assert [entry.task_name for entry in entries] == ["Confirm", "Shoot", "Deliver"]

    def test_tied_orders_should_keep_template_position(self, portrait_session: Session) -> None:
        template = TimelineTemplate(
            session_type="portrait",
            tasks=(
                TaskDefinition(name="Second", offset_days=0, order=2),
                TaskDefinition(name="First A", offset_days=0, order=1),
                TaskDefinition(name="First B", offset_days=0, order=1),
            ),
        )

        entries = materialize(portrait_session, template)

        assert [entry.task_name for entry in entries] == ["First A", "First B", "Second"]

    def test_empty_template_should_produce_no_entries(self, portrait_session: Session) -> None:
        assert materialize(portrait_session, TimelineTemplate(session_type="portrait")) == []

    def test_mismatched_template_should_raise(self, portrait_template: TimelineTemplate) -> None:
        wedding = Session(
            id=uuid.uuid4(),
            session_type="wedding",
            session_date=date(2024, 9, 1),
        )

        with pytest.raises(InvalidTemplateMatchError) as exc_info:
            materialize(wedding, portrait_template)

        assert exc_info.value.details["session_type"] == "wedding"
        assert exc_info.value.details["template_session_type"] == "portrait"

    def test_should_copy_task_automation_metadata(self, portrait_session: Session) -> None:
        template = TimelineTemplate(
            session_type="portrait",
            tasks=(
                TaskDefinition(
                    name="Preview gallery delivery",
                    offset_days=3,
                    order=6,
                    can_be_automated=True,
                    estimated_hours=0.5,
                    can_be_batched=True,
                ),
            ),
        )

        (entry,) = materialize(portrait_session, template)

        assert entry.can_be_automated is True
        assert entry.estimated_hours == 0.5
        assert entry.can_be_batched is True
        assert entry.approval_required is False
        assert entry.automation_status is AutomationStatus.PENDING
        assert entry.adjusted_date is None
        assert entry.completed_by is None
