"""Category queries."""

from __future__ import annotations

from uuid import UUID

from bookstore.application.categories.ports import CategoryReader
from bookstore.application.i18n import localize_category
from bookstore.domain.entities import Category
from bookstore.domain.enums import Locale
from bookstore.domain.exceptions import CategoryNotFoundError


class ListCategoriesQuery:
    def __init__(self, reader: CategoryReader) -> None:
        self._reader = reader

    async def execute(self, locale: Locale, search: str | None = None) -> list[Category]:
        categories = await self._reader.list_all(search or None)
        return [localize_category(category, locale) for category in categories]


class GetCategoryQuery:
    def __init__(self, reader: CategoryReader) -> None:
        self._reader = reader

    async def execute(self, category_id: UUID, locale: Locale) -> Category:
        """Return the localized category.

        Raises:
            CategoryNotFoundError: no category has this id.
        """
        category = await self._reader.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return localize_category(category, locale)
