"""SQLAlchemy Category Reader / Gateway."""

from __future__ import annotations

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.application.categories.dto import CategoryValues
from bookstore.application.categories.ports import CategoryReader
from bookstore.domain.entities import Category
from bookstore.domain.exceptions import (
    CategoryInUseError,
    CategoryNameConflictError,
    CategoryNotFoundError,
)
from bookstore.infrastructure.persistence_postgres.mappers import (
    category_to_domain,
    translations_to_json,
)
from bookstore.infrastructure.persistence_postgres.models import BookModel, CategoryModel


class SqlaCategoryReader(CategoryReader):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self, search: str | None = None) -> Sequence[Category]:
        query = select(CategoryModel).order_by(CategoryModel.name.asc())
        if search:
            query = query.where(CategoryModel.name.ilike(f"%{search}%"))
        result = await self._session.execute(query)
        return [category_to_domain(model) for model in result.scalars().all()]

    async def get_by_id(self, category_id: UUID) -> Category | None:
        model = await self._session.get(CategoryModel, category_id, populate_existing=True)
        return category_to_domain(model) if model is not None else None

    async def get_by_name(self, name: str) -> Category | None:
        result = await self._session.execute(
            select(CategoryModel).where(CategoryModel.name == name)
        )
        model = result.scalar_one_or_none()
        return category_to_domain(model) if model is not None else None

    async def count_books(self, category_id: UUID) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(BookModel).where(BookModel.category_id == category_id)
        )
        return int(result.scalar_one())


class SqlaCategoryGateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, values: CategoryValues) -> Category:
        model = CategoryModel(
            name=values.name,
            description=values.description,
            name_translations=translations_to_json(values.name_translations),
            description_translations=translations_to_json(values.description_translations),
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # unique(name) lost a race with a concurrent insert
            raise CategoryNameConflictError(values.name or "") from e
        await self._session.refresh(model)
        return category_to_domain(model)

    async def update(self, category_id: UUID, values: CategoryValues) -> None:
        model = await self._session.get(CategoryModel, category_id)
        if model is None:
            raise CategoryNotFoundError(category_id)

        name = values.name if values.name is not None else model.name
        model.name = name
        if values.description is not None:
            model.description = values.description
        if values.name_translations is not None:
            model.name_translations = translations_to_json(values.name_translations)
        if values.description_translations is not None:
            model.description_translations = translations_to_json(
                values.description_translations
            )
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise CategoryNameConflictError(name) from e

    async def delete(self, category_id: UUID) -> None:
        try:
            await self._session.execute(delete(CategoryModel).where(CategoryModel.id == category_id))
        except IntegrityError as e:
            # a book was attached after the dependency check
            raise CategoryInUseError(category_id, book_count=1) from e
