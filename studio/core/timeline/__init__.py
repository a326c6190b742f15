"""
Session timeline derivation.

Exports:
  - resolve: Date offset resolver
  - materialize: Template to timeline entries
  - Session, TaskDefinition, TimelineTemplate, TimelineEntry: Domain types
  - AutomationStatus: Automation states of an entry
  - validate_tasks: Template task checks
  - SessionStore, TemplateStore, TimelineRepository: Collaborator protocols
"""

from studio.core.timeline.date_offset import resolve
from studio.core.timeline.interfaces import SessionStore, TemplateStore, TimelineRepository
from studio.core.timeline.materializer import materialize
from studio.core.timeline.types import (
    AutomationStatus,
    Session,
    TaskDefinition,
    TimelineEntry,
    TimelineTemplate,
    validate_tasks,
)

__all__ = [
    "resolve",
    "materialize",
    "AutomationStatus",
    "Session",
    "TaskDefinition",
    "TimelineEntry",
    "TimelineTemplate",
    "validate_tasks",
    "SessionStore",
    "TemplateStore",
    "TimelineRepository",
]
