"""
Timeline materializer.

Turns a timeline template into concrete dated entries for one session.
Pure: persistence is the caller's responsibility.

Dependencies: studio.core.timeline.date_offset, studio.core.exceptions
System role: Template to timeline transformation
"""

from studio.core.exceptions import InvalidTemplateMatchError
from studio.core.timeline.date_offset import resolve
from studio.core.timeline.types import Session, TimelineEntry, TimelineTemplate


def materialize(session: Session, template: TimelineTemplate) -> list[TimelineEntry]:
    """
    Produce the ordered timeline entries for a session.

    Entries are sorted ascending by task order. sorted() is stable, so tasks
    sharing an order keep their template position.

    Args:
        session: Session providing the anchor date
        template: Template for the session's type

    Returns:
        list[TimelineEntry]: Uncompleted entries ordered by task_order, carrying
        each task's automation metadata

    Raises:
        InvalidTemplateMatchError: If the template belongs to another session type
    """
    if template.session_type != session.session_type:
        raise InvalidTemplateMatchError(
            session_type=session.session_type,
            template_session_type=template.session_type,
        )

    entries = [
        TimelineEntry(
            session_id=session.id,
            task_name=task.name,
            calculated_date=resolve(session.session_date, task.offset_days),
            task_order=task.order,
            can_be_automated=task.can_be_automated,
            approval_required=task.approval_required,
            estimated_hours=task.estimated_hours,
            requires_photographer=task.requires_photographer,
            can_be_batched=task.can_be_batched,
        )
        for task in template.tasks
    ]
    return sorted(entries, key=lambda entry: entry.task_order)
