"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory timeline collaborators, sample sessions/templates,
SQLite async database session
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import asyncio
import uuid
from dataclasses import replace
from datetime import date

import pytest

from studio.core.exceptions import TimelineConflictError
from studio.core.timeline.types import (
    AUTOMATION_OPEN_STATUSES,
    Session,
    TaskDefinition,
    TimelineEntry,
    TimelineTemplate,
)


class InMemorySessionStore:
    """SessionStore backed by a dict."""

    def __init__(self, sessions=()) -> None:
        self.sessions = {session.id: session for session in sessions}
        self.calls = 0

    async def get_session(self, session_id):
        self.calls += 1
        await asyncio.sleep(0)
        return self.sessions.get(session_id)


class InMemoryTemplateStore:
    """TemplateStore backed by a dict keyed by session type."""

    def __init__(self, templates=()) -> None:
        self.templates = {template.session_type: template for template in templates}
        self.calls = 0

    async def get_template_for_type(self, session_type):
        self.calls += 1
        await asyncio.sleep(0)
        return self.templates.get(session_type)


class InMemoryTimelineRepository:
    """
    TimelineRepository backed by a dict.

    Enforces uniqueness of (session_id, task_order) like the SQL table and
    yields to the event loop on every call so concurrent callers interleave.
    """

    def __init__(self) -> None:
        self.rows: dict[uuid.UUID, list[TimelineEntry]] = {}
        self.insert_calls = 0
        self.conflicts = 0

    async def list_entries(self, session_id):
        await asyncio.sleep(0)
        return sorted(self.rows.get(session_id, []), key=lambda entry: entry.task_order)

    async def insert_entries(self, session_id, entries):
        self.insert_calls += 1
        await asyncio.sleep(0)
        existing = {entry.task_order for entry in self.rows.get(session_id, [])}
        if any(entry.task_order in existing for entry in entries):
            self.conflicts += 1
            raise TimelineConflictError(str(session_id))
        self.rows.setdefault(session_id, []).extend(entries)

    async def delete_entries(self, session_id):
        await asyncio.sleep(0)
        return len(self.rows.pop(session_id, []))

    async def get_entry(self, session_id, task_order):
        for entry in self.rows.get(session_id, []):
            if entry.task_order == task_order:
                return entry
        return None

    async def update_entry(self, session_id, task_order, **changes):
        entries = self.rows.get(session_id, [])
        for index, entry in enumerate(entries):
            if entry.task_order == task_order:
                entries[index] = replace(entry, **changes)
                return entries[index]
        return None

    async def list_pending(self, session_id=None, due_before=None, automatable_only=False):
        pending = [
            entry
            for sid, entries in self.rows.items()
            if session_id is None or sid == session_id
            for entry in entries
            if not entry.completed
            and (due_before is None or entry.due_date <= due_before)
            and (
                not automatable_only
                or (entry.can_be_automated and entry.automation_status in AUTOMATION_OPEN_STATUSES)
            )
        ]
        return sorted(pending, key=lambda entry: (entry.due_date, entry.task_order))


@pytest.fixture
def portrait_template() -> TimelineTemplate:
    """Three-task portrait template."""
    return TimelineTemplate(
        session_type="portrait",
        tasks=(
            TaskDefinition(name="Book venue", offset_days=-30, order=1),
            TaskDefinition(name="Send reminder", offset_days=-7, order=2),
            TaskDefinition(name="Deliver gallery", offset_days=14, order=3),
        ),
    )


@pytest.fixture
def portrait_session() -> Session:
    """Portrait session on 2024-06-15."""
    return Session(
        id=uuid.uuid4(),
        session_type="portrait",
        session_date=date(2024, 6, 15),
        session_title="Garcia family portraits",
    )


@pytest.fixture
def session_store(portrait_session: Session) -> InMemorySessionStore:
    return InMemorySessionStore([portrait_session])


@pytest.fixture
def template_store(portrait_template: TimelineTemplate) -> InMemoryTemplateStore:
    return InMemoryTemplateStore([portrait_template])


@pytest.fixture
def timeline_repository() -> InMemoryTimelineRepository:
    return InMemoryTimelineRepository()


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Foreign keys are switched on so ON DELETE CASCADE behaves like Postgres.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy import event
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from studio.boundary.db.base import Base
    import studio.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
