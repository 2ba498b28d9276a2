"""Create the bookstore tables (no migrations; existing tables are kept)."""

from __future__ import annotations

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import create_async_engine

from bookstore.infrastructure.persistence_postgres import Base
from bookstore.setup.config import get_settings
from bookstore.setup.logging import setup_logging

logger = logging.getLogger(__name__)


async def init_db() -> int:
    settings = get_settings()
    target = settings.database_url.split("@")[-1]
    logger.info("Connecting to database", extra={"target": target})

    engine = create_async_engine(settings.database_url, echo=False)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(
            "Database initialized",
            extra={"tables": sorted(Base.metadata.tables)},
        )
        return 0
    except Exception:  # pragma: no cover - diagnostic output
        logger.exception("Database initialization failed")
        return 1
    finally:
        await engine.dispose()


def main() -> None:
    setup_logging()
    sys.exit(asyncio.run(init_db()))


if __name__ == "__main__":
    main()
