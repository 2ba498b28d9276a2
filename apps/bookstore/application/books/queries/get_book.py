"""Get Book Query."""

from __future__ import annotations

from uuid import UUID

from bookstore.application.books.ports import BookReader
from bookstore.application.i18n import localize_book
from bookstore.domain.entities import Book
from bookstore.domain.enums import Locale
from bookstore.domain.exceptions import BookNotFoundError


class GetBookQuery:
    def __init__(self, reader: BookReader) -> None:
        self._reader = reader

    async def execute(self, book_id: UUID, locale: Locale) -> Book:
        """Return the localized book.

        Raises:
            BookNotFoundError: no book has this id.
        """
        book = await self._reader.get_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return localize_book(book, locale)
