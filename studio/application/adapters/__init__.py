"""Storage adapters binding application services to the database boundary."""

from .timeline_stores import SqlSessionStore, SqlTemplateStore, SqlTimelineRepository

__all__ = ["SqlSessionStore", "SqlTemplateStore", "SqlTimelineRepository"]
