"""Category Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID

from bookstore.domain.entities import Category


class CategoryReader(ABC):
    """Read side of categories."""

    @abstractmethod
    async def list_all(self, search: str | None = None) -> Sequence[Category]:
        """Categories ordered by name, optionally filtered by a name substring."""

    @abstractmethod
    async def get_by_id(self, category_id: UUID) -> Category | None: ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Category | None: ...

    @abstractmethod
    async def count_books(self, category_id: UUID) -> int:
        """Number of books referencing the category."""
