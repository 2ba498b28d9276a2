"""SQLAlchemy Book Reader Implementation."""

from __future__ import annotations

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.application.books.dto import BookSearchCriteria
from bookstore.application.books.ports import BookReader
from bookstore.domain.entities import Book
from bookstore.infrastructure.persistence_postgres.book_query_builder import (
    build_count_statement,
    build_page_statement,
    with_book_relations,
)
from bookstore.infrastructure.persistence_postgres.mappers import book_to_domain
from bookstore.infrastructure.persistence_postgres.models import BookModel


class SqlaBookReader(BookReader):
    """BookReader backed by PostgreSQL.

    The count and the page fetch are two independent statements; under
    concurrent writes they may observe slightly different snapshots.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def search(self, criteria: BookSearchCriteria) -> tuple[Sequence[Book], int]:
        total = int((await self._session.execute(build_count_statement(criteria))).scalar_one())
        result = await self._session.execute(build_page_statement(criteria))
        books = [book_to_domain(model) for model in result.scalars().all()]
        return books, total

    async def get_by_id(self, book_id: UUID) -> Book | None:
        query = with_book_relations(select(BookModel)).where(BookModel.id == book_id)
        result = await self._session.execute(query)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return book_to_domain(model)
