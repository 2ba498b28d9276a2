"""Tag Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence
from uuid import UUID

from bookstore.domain.entities import Tag


class TagReader(ABC):
    @abstractmethod
    async def list_all(self) -> Sequence[Tag]:
        """All tags ordered by name."""

    @abstractmethod
    async def get_by_name(self, name: str) -> Tag | None: ...

    @abstractmethod
    async def find_missing(self, tag_ids: Iterable[UUID]) -> list[UUID]:
        """Return the ids among ``tag_ids`` that do not exist."""
