"""Create Book command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from bookstore.application.books.dto import BookDraft, NewBook
from bookstore.application.common.exceptions import MissingCanonicalTextError
from bookstore.application.i18n import canonical_text, merge_translations
from bookstore.domain.entities import Book
from bookstore.domain.exceptions import BookNotFoundError

if TYPE_CHECKING:
    from bookstore.application.books.ports import BookCommandGateway, BookReader
    from bookstore.application.books.services import BookReferenceChecker
    from bookstore.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class CreateBookInteractor:
    """Creates a book owned by the caller.

    The book row and its tag links are committed together or not at all.
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

    async def execute(self, author_id: UUID, draft: BookDraft) -> Book:
        """Create a book.

        Args:
            author_id: Caller id; becomes the immutable owner.
            draft: Canonical and per-language input.

        Returns:
            The stored book with author, category and tags.

        Raises:
            MissingCanonicalTextError: no title in any form.
            CategoryNotFoundError: unknown category.
            TagNotFoundError: unknown tag id.
        """
        title = canonical_text(draft.title)
        if title is None:
            raise MissingCanonicalTextError("title")

        await self._references.ensure_category(draft.category_id)
        await self._references.ensure_tags(draft.tag_ids)

        new_book = NewBook(
            author_id=author_id,
            title=title,
            price=draft.price,
            category_id=draft.category_id,
            description=canonical_text(draft.description),
            title_translations=merge_translations(draft.title),
            description_translations=merge_translations(draft.description),
            thumbnail=draft.thumbnail,
            tag_ids=list(dict.fromkeys(draft.tag_ids)),
        )

        try:
            book_id = await self._book_command.add(new_book)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info(
            "Book created",
            extra={
                "book_id": str(book_id),
                "author_id": str(author_id),
                "tag_count": len(new_book.tag_ids),
            },
        )

        book = await self._book_reader.get_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book
