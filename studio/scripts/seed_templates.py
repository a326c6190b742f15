"""
Seed default timeline templates and backfill missing timelines.

Upserts the studio's standard templates, then materializes a timeline for
every session that does not have one yet. Sessions whose type still has no
template are reported and skipped.

Run: python -m studio.scripts.seed_templates [--skip-backfill] [--limit N]

Dependencies: studio.application, studio.boundary.db
"""

import argparse
import asyncio
import logging

from studio.application.adapters import SqlSessionStore, SqlTemplateStore, SqlTimelineRepository
from studio.application.services import TemplateService, TimelineService
from studio.boundary.db import get_async_engine, get_async_session_factory, session_crud
from studio.configs import get_settings
from studio.core.exceptions import TemplateMissingError
from studio.core.timeline.types import TaskDefinition
from studio.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def _task(name, offset_days, order, automated, approval, hours, photographer, batched) -> TaskDefinition:
    return TaskDefinition(
        name=name,
        offset_days=offset_days,
        order=order,
        can_be_automated=automated,
        approval_required=approval,
        estimated_hours=hours,
        requires_photographer=photographer,
        can_be_batched=batched,
    )


# name, offset, order, automated, approval, hours, photographer, batched
DEFAULT_TEMPLATES: dict[str, list[TaskDefinition]] = {
    "Portrait Session": [
        _task("Contract & payment confirmed", -14, 1, True, False, 0.5, False, True),
        _task("Style guide & preparation materials sent", -7, 2, True, True, 1.0, False, True),
        _task("Pre-session consultation call", -3, 3, False, False, 0.5, True, False),
        _task("Session day - Portrait photography", 0, 4, False, False, 2.0, True, False),
        _task("Photo editing & enhancement", 2, 5, False, False, 3.0, True, True),
        _task("Preview gallery delivery", 3, 6, True, False, 0.5, False, True),
        _task("Final selection & delivery", 7, 7, True, False, 1.0, False, True),
    ],
    "Family Session": [
        _task("Contract & payment confirmed", -14, 1, True, False, 0.5, False, True),
        _task("Family preparation guide sent", -10, 2, True, True, 1.0, False, True),
        _task("Location & timing consultation", -7, 3, False, False, 0.5, True, False),
        _task("Pre-session family call", -2, 4, False, False, 0.5, True, False),
        _task("Session day - Family portraits", 0, 5, False, False, 1.5, True, False),
        _task("Photo editing & enhancement", 2, 6, False, False, 3.0, True, True),
        _task("Online gallery delivery", 5, 7, True, False, 0.5, False, True),
        _task("Print & product ordering consultation", 14, 8, True, False, 1.0, False, False),
    ],
    "Branding Session": [
        _task("Contract & payment confirmed", -14, 1, True, False, 0.5, False, True),
        _task("Brand questionnaire sent & completed", -10, 2, True, True, 1.0, False, True),
        _task("Style guide & mood board creation", -7, 3, True, True, 2.0, True, False),
        _task("Location scouting & preparation", -5, 4, False, False, 1.5, True, False),
        _task("Pre-session consultation call", -2, 5, False, False, 0.5, True, False),
        _task("Session day - Branding photography", 0, 6, False, False, 3.0, True, False),
        _task("Initial photo selection & editing", 2, 7, False, False, 4.0, True, True),
        _task("Preview gallery delivery", 3, 8, True, False, 0.5, False, True),
        _task("Client selection & final editing", 10, 9, False, False, 3.0, True, True),
        _task("Complete brand package delivery", 14, 10, True, False, 1.0, False, True),
    ],
    "Executive Session": [
        _task("Contract & payment confirmed", -21, 1, True, False, 0.5, False, True),
        _task("Executive style consultation", -14, 2, True, True, 1.5, False, False),
        _task("Wardrobe & styling guide delivery", -10, 3, True, True, 2.0, False, True),
        _task("Location & setup planning", -7, 4, False, False, 1.0, True, False),
        _task("Pre-session strategy call", -2, 5, False, False, 0.75, True, False),
        _task("Session day - Executive portraits", 0, 6, False, False, 2.5, True, False),
        _task("Professional retouching & editing", 2, 7, False, False, 4.0, True, True),
        _task("Preview gallery with selections", 4, 8, True, False, 0.5, False, True),
        _task("Final high-resolution delivery", 7, 9, True, False, 1.0, False, True),
        _task("LinkedIn & website optimization guide", 10, 10, True, True, 1.5, False, True),
    ],
}


async def seed_templates() -> int:
    """Upsert every default template. Returns the number written."""
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as db:
        service = TemplateService(db=db)
        for session_type, tasks in DEFAULT_TEMPLATES.items():
            await service.upsert_template(session_type, tasks)
    return len(DEFAULT_TEMPLATES)


async def backfill_timelines(limit: int | None = None) -> dict[str, int]:
    """
    Materialize timelines for sessions that have none.

    Args:
        limit: Maximum number of sessions to process

    Returns:
        dict: Counts of materialized and skipped sessions
    """
    settings = get_settings()
    counts = {"materialized": 0, "skipped": 0}

    SessionFactory = get_async_session_factory()
    async with SessionFactory() as db:
        sessions = await session_crud.get_without_timeline(db, limit=limit)
        service = TimelineService(
            session_store=SqlSessionStore(db),
            template_store=SqlTemplateStore(db),
            timeline_repository=SqlTimelineRepository(db),
            storage_timeout=settings.timeline.storage_timeout_seconds,
        )
        for session in sessions:
            try:
                await service.get_timeline(session.id)
            except TemplateMissingError:
                counts["skipped"] += 1
                continue
            counts["materialized"] += 1

    return counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed timeline templates")
    parser.add_argument("--skip-backfill", action="store_true", help="Only write templates")
    parser.add_argument("--limit", type=int, default=None, help="Maximum sessions to backfill")
    args = parser.parse_args()

    configure_logging()

    async def _run() -> None:
        written = await seed_templates()
        logger.info("Templates seeded", extra={"count": written})
        if not args.skip_backfill:
            counts = await backfill_timelines(limit=args.limit)
            logger.info(
                f"Backfill done: {counts['materialized']} materialized, {counts['skipped']} skipped",
                extra=counts,
            )
        await get_async_engine().dispose()

    asyncio.run(_run())


if __name__ == "__main__":
    main()
