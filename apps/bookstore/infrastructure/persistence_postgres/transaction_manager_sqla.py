"""SQLAlchemy implementation of the transaction manager."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SqlaTransactionManager:
    """Commits or rolls back the writes staged in the request session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        logger.warning("Rolling back transaction")
        await self._session.rollback()
