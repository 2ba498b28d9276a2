"""Referential checks for book writes."""

from __future__ import annotations

from typing import Iterable
from uuid import UUID

from bookstore.application.categories.ports import CategoryReader
from bookstore.application.tags.ports import TagReader
from bookstore.domain.exceptions import CategoryNotFoundError, TagNotFoundError


class BookReferenceChecker:
    """Ensures a book only points at existing categories and tags."""

    def __init__(self, categories: CategoryReader, tags: TagReader) -> None:
        self._categories = categories
        self._tags = tags

    async def ensure_category(self, category_id: UUID) -> None:
        if await self._categories.get_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

    async def ensure_tags(self, tag_ids: Iterable[UUID]) -> None:
        tag_ids = list(tag_ids)
        if not tag_ids:
            return
        missing = await self._tags.find_missing(tag_ids)
        if missing:
            raise TagNotFoundError(missing[0])
