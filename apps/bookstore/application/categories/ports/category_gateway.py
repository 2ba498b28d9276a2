"""Category Command Gateway Port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from bookstore.application.categories.dto import CategoryValues
from bookstore.domain.entities import Category


class CategoryCommandGateway(Protocol):
    async def add(self, values: CategoryValues) -> Category:
        ...

    async def update(self, category_id: UUID, values: CategoryValues) -> None:
        ...

    async def delete(self, category_id: UUID) -> None:
        ...
