"""Delete Category command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from bookstore.domain.exceptions import CategoryInUseError, CategoryNotFoundError

if TYPE_CHECKING:
    from bookstore.application.categories.ports import CategoryCommandGateway, CategoryReader
    from bookstore.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class DeleteCategoryInteractor:
    def __init__(
        self,
        category_reader: "CategoryReader",
        category_command: "CategoryCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._category_reader = category_reader
        self._category_command = category_command
        self._tx = transaction_manager

    async def execute(self, category_id: UUID) -> None:
        """Delete a category that no book references.

        Raises:
            CategoryNotFoundError: no category has this id.
            CategoryInUseError: at least one book still uses it.
        """
        if await self._category_reader.get_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

        book_count = await self._category_reader.count_books(category_id)
        if book_count > 0:
            raise CategoryInUseError(category_id, book_count)

        try:
            await self._category_command.delete(category_id)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info("Category deleted", extra={"category_id": str(category_id)})
