"""Book Command Gateway Port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from bookstore.application.books.dto import BookPatch, NewBook


class BookCommandGateway(Protocol):
    """Write side of the book catalog.

    Writes are staged in the current transaction; callers commit.
    """

    async def add(self, book: NewBook) -> UUID:
        """Insert a book and its tag links, returning the new id."""
        ...

    async def update(self, book_id: UUID, patch: BookPatch) -> None:
        """Apply a patch and advance ``updated_at``."""
        ...

    async def delete(self, book_id: UUID) -> None:
        ...
