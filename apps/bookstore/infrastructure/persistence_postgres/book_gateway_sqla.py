"""SQLAlchemy Book Command Gateway."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bookstore.application.books.dto import BookPatch, NewBook
from bookstore.domain.exceptions import BookNotFoundError
from bookstore.infrastructure.persistence_postgres.mappers import translations_to_json
from bookstore.infrastructure.persistence_postgres.models import BookModel, TagModel


class SqlaBookGateway:
    """Stages book writes in the request session; the interactor commits."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, book: NewBook) -> UUID:
        model = BookModel(
            title=book.title,
            description=book.description,
            title_translations=translations_to_json(book.title_translations),
            description_translations=translations_to_json(book.description_translations),
            price=book.price,
            thumbnail=book.thumbnail,
            author_id=book.author_id,
            category_id=book.category_id,
        )
        model.tags = list(await self._load_tags(book.tag_ids))
        self._session.add(model)
        await self._session.flush()
        return model.id

    async def update(self, book_id: UUID, patch: BookPatch) -> None:
        query = (
            select(BookModel).options(selectinload(BookModel.tags)).where(BookModel.id == book_id)
        )
        model = (await self._session.execute(query)).scalar_one_or_none()
        if model is None:
            raise BookNotFoundError(book_id)

        if patch.title is not None:
            model.title = patch.title
        if patch.description is not None:
            model.description = patch.description
        if patch.title_translations is not None:
            model.title_translations = translations_to_json(patch.title_translations)
        if patch.description_translations is not None:
            model.description_translations = translations_to_json(patch.description_translations)
        if patch.price is not None:
            model.price = patch.price
        if patch.clear_thumbnail:
            model.thumbnail = None
        elif patch.thumbnail is not None:
            model.thumbnail = patch.thumbnail
        if patch.category_id is not None:
            model.category_id = patch.category_id
        if patch.tag_ids is not None:
            model.tags = list(await self._load_tags(patch.tag_ids))

        model.updated_at = datetime.now(timezone.utc)
        await self._session.flush()

    async def delete(self, book_id: UUID) -> None:
        # book_tags rows go through ON DELETE CASCADE
        await self._session.execute(delete(BookModel).where(BookModel.id == book_id))

    async def _load_tags(self, tag_ids: Sequence[UUID]) -> Sequence[TagModel]:
        if not tag_ids:
            return []
        result = await self._session.execute(select(TagModel).where(TagModel.id.in_(tag_ids)))
        return result.scalars().all()
