"""SQLAlchemy Tag Reader / Gateway."""

from __future__ import annotations

from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.application.tags.ports import TagReader
from bookstore.domain.entities import Tag
from bookstore.domain.exceptions import TagNameConflictError
from bookstore.domain.value_objects import LocalizedText
from bookstore.infrastructure.persistence_postgres.mappers import (
    tag_to_domain,
    translations_to_json,
)
from bookstore.infrastructure.persistence_postgres.models import TagModel


class SqlaTagReader(TagReader):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> Sequence[Tag]:
        result = await self._session.execute(select(TagModel).order_by(TagModel.name.asc()))
        return [tag_to_domain(model) for model in result.scalars().all()]

    async def get_by_name(self, name: str) -> Tag | None:
        result = await self._session.execute(select(TagModel).where(TagModel.name == name))
        model = result.scalar_one_or_none()
        return tag_to_domain(model) if model is not None else None

    async def find_missing(self, tag_ids: Iterable[UUID]) -> list[UUID]:
        wanted = list(dict.fromkeys(tag_ids))
        if not wanted:
            return []
        result = await self._session.execute(select(TagModel.id).where(TagModel.id.in_(wanted)))
        found = set(result.scalars().all())
        return [tag_id for tag_id in wanted if tag_id not in found]


class SqlaTagGateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, name: str, name_translations: LocalizedText | None) -> Tag:
        model = TagModel(name=name, name_translations=translations_to_json(name_translations))
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise TagNameConflictError(name) from e
        await self._session.refresh(model)
        return tag_to_domain(model)
