"""Book Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID

from bookstore.application.books.dto import BookSearchCriteria
from bookstore.domain.entities import Book


class BookReader(ABC):
    """Read side of the book catalog."""

    @abstractmethod
    async def search(self, criteria: BookSearchCriteria) -> tuple[Sequence[Book], int]:
        """Return one page of matching books and the total number of matches.

        Books come with author, category and tags loaded.
        """

    @abstractmethod
    async def get_by_id(self, book_id: UUID) -> Book | None:
        """Return one book with author, category and tags, or None."""
