"""Delete Book command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from bookstore.domain.exceptions import BookNotFoundError, BookOwnershipError

if TYPE_CHECKING:
    from bookstore.application.books.ports import BookCommandGateway, BookReader
    from bookstore.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class DeleteBookInteractor:
    def __init__(
        self,
        book_reader: "BookReader",
        book_command: "BookCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._book_reader = book_reader
        self._book_command = book_command
        self._tx = transaction_manager

    async def execute(self, caller_id: UUID, book_id: UUID) -> None:
        """Delete a book owned by the caller; its tag links go with it.

        Raises:
            BookNotFoundError: no book has this id.
            BookOwnershipError: caller is not the author.
        """
        book = await self._book_reader.get_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        if not book.is_owned_by(caller_id):
            raise BookOwnershipError("delete")

        try:
            await self._book_command.delete(book_id)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info("Book deleted", extra={"book_id": str(book_id)})
