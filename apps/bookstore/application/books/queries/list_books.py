"""List Books Query - localized catalog listing."""

from __future__ import annotations

import logging
from uuid import UUID

from bookstore.application.books.dto import BookSearchCriteria
from bookstore.application.books.ports import BookReader
from bookstore.application.common.dto import Page, PaginationMeta
from bookstore.application.i18n import localize_book
from bookstore.domain.entities import Book
from bookstore.domain.enums import Locale

logger = logging.getLogger(__name__)


class ListBooksQuery:
    """Filtered, sorted, paginated book listing projected to one locale."""

    def __init__(self, reader: BookReader) -> None:
        self._reader = reader

    async def execute(self, criteria: BookSearchCriteria, locale: Locale) -> Page[Book]:
        """Fetch one page of books.

        Args:
            criteria: Filters, sort and pagination.
            locale: Display locale of titles, descriptions and names.

        Returns:
            Localized books plus pagination metadata of the filtered set.
        """
        books, total = await self._reader.search(criteria)

        logger.info(
            "Books listed",
            extra={
                "page": criteria.page,
                "limit": criteria.limit,
                "total": total,
                "returned": len(books),
                "locale": locale.value,
            },
        )

        return Page(
            items=[localize_book(book, locale) for book in books],
            pagination=PaginationMeta.build(criteria.page, criteria.limit, total),
        )


class ListMyBooksQuery:
    """Same listing, restricted to books authored by the caller."""

    def __init__(self, reader: BookReader) -> None:
        self._list_books = ListBooksQuery(reader)

    async def execute(
        self, author_id: UUID, criteria: BookSearchCriteria, locale: Locale
    ) -> Page[Book]:
        return await self._list_books.execute(criteria.for_author(author_id), locale)
