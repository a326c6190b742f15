"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, studio.configs
System role: Database schema initialization

Usage:
    python -m studio.boundary.db.create_tables
    python -m studio.boundary.db.create_tables --drop
"""

import argparse
import asyncio
import logging

from studio.boundary.db.base import Base
from studio.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from studio.boundary.db.models.session_model import SessionModel  # noqa: F401
from studio.boundary.db.models.template_model import TimelineTemplateModel  # noqa: F401
from studio.boundary.db.models.timeline_entry_model import TimelineEntryModel  # noqa: F401
from studio.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


def main() -> None:
    parser = argparse.ArgumentParser(description="Initialize the timeline database schema")
    parser.add_argument("--drop", action="store_true", help="Drop all tables before creating them")
    args = parser.parse_args()

    configure_logging()

    async def _run() -> None:
        if args.drop:
            await drop_all_tables()
        await create_all_tables()
        await get_async_engine().dispose()

    asyncio.run(_run())


if __name__ == "__main__":
    main()
