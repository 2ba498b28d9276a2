"""Update Book command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from bookstore.application.books.dto import BookChanges, BookPatch
from bookstore.application.i18n import merge_translations
from bookstore.domain.entities import Book
from bookstore.domain.exceptions import BookNotFoundError, BookOwnershipError

if TYPE_CHECKING:
    from bookstore.application.books.ports import BookCommandGateway, BookReader
    from bookstore.application.books.services import BookReferenceChecker
    from bookstore.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class UpdateBookInteractor:
    """Applies a partial update to a book owned by the caller.

    Supplying any per-language value replaces the whole translation object
    of that field (missing languages are refilled from the canonical input).
    Supplying ``tag_ids`` replaces the tag set in the same transaction.
    """

    def __init__(
        self,
        book_reader: "BookReader",
        book_command: "BookCommandGateway",
        references: "BookReferenceChecker",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._book_reader = book_reader
        self._book_command = book_command
        self._references = references
        self._tx = transaction_manager

    async def execute(self, caller_id: UUID, book_id: UUID, changes: BookChanges) -> Book:
        """Update a book.

        Raises:
            BookNotFoundError: no book has this id.
            BookOwnershipError: caller is not the author. Nothing is written.
            CategoryNotFoundError: unknown new category.
            TagNotFoundError: unknown tag id in the replacement set.
        """
        book = await self._book_reader.get_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        if not book.is_owned_by(caller_id):
            logger.warning(
                "Book update rejected: not owner",
                extra={"book_id": str(book_id), "caller_id": str(caller_id)},
            )
            raise BookOwnershipError("edit")

        if changes.category_id is not None:
            await self._references.ensure_category(changes.category_id)
        if changes.tag_ids is not None:
            await self._references.ensure_tags(changes.tag_ids)

        patch = BookPatch(
            title=changes.title.canonical or None,
            description=changes.description.canonical or None,
            title_translations=merge_translations(changes.title),
            description_translations=merge_translations(changes.description),
            price=changes.price,
            thumbnail=None if changes.clear_thumbnail else changes.thumbnail,
            category_id=changes.category_id,
            tag_ids=(
                list(dict.fromkeys(changes.tag_ids)) if changes.tag_ids is not None else None
            ),
            clear_thumbnail=changes.clear_thumbnail,
        )

        try:
            await self._book_command.update(book_id, patch)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info(
            "Book updated",
            extra={"book_id": str(book_id), "tags_replaced": patch.tag_ids is not None},
        )

        updated = await self._book_reader.get_by_id(book_id)
        if updated is None:
            raise BookNotFoundError(book_id)
        return updated
