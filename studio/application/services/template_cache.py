"""
In-memory timeline template cache.

TemplateCache holds loaded templates per session type for a bounded time and
lives for the process (owned by the API service cache). CachedTemplateStore
wraps a per-request TemplateStore with that cache.

Dependencies: time (stdlib), studio.core.timeline
System role: Read-through cache in front of the template store
"""

import logging
import time
from typing import Callable

from studio.core.timeline.interfaces import TemplateStore
from studio.core.timeline.types import TimelineTemplate

logger = logging.getLogger(__name__)


class TemplateCache:
    """
    Per-session-type template cache with a time-to-live.

    Only found templates are stored; a missing template is looked up again
    on the next request so newly configured types show up immediately.
    A ttl of 0 disables caching.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        """
        Initialize an empty cache.

        Args:
            ttl_seconds: Seconds an entry stays valid
            clock: Monotonic time source (injectable for tests)
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, TimelineTemplate]] = {}

    @property
    def enabled(self) -> bool:
        return self.ttl_seconds > 0

    def get(self, session_type: str) -> TimelineTemplate | None:
        """Return a fresh cached template, dropping it if expired."""
        cached = self._entries.get(session_type)
        if cached is None:
            return None

        expires_at, template = cached
        if self._clock() >= expires_at:
            del self._entries[session_type]
            return None
        return template

    def put(self, template: TimelineTemplate) -> None:
        if not self.enabled:
            return
        self._entries[template.session_type] = (self._clock() + self.ttl_seconds, template)

    def invalidate(self, session_type: str | None = None) -> None:
        """
        Drop one session type, or everything when session_type is None.

        Args:
            session_type: Session type to evict
        """
        if session_type is None:
            self._entries.clear()
        else:
            self._entries.pop(session_type, None)
        logger.debug("Template cache invalidated", extra={"session_type": session_type})

    def __len__(self) -> int:
        return len(self._entries)


class CachedTemplateStore:
    """TemplateStore that consults a TemplateCache before the wrapped store."""

    def __init__(self, inner: TemplateStore, cache: TemplateCache) -> None:
        self.inner = inner
        self.cache = cache

    async def get_template_for_type(self, session_type: str) -> TimelineTemplate | None:
        template = self.cache.get(session_type)
        if template is not None:
            return template

        template = await self.inner.get_template_for_type(session_type)
        if template is not None:
            self.cache.put(template)
        return template
