"""Update Category command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from bookstore.application.categories.dto import CategoryInput, CategoryValues
from bookstore.application.i18n import merge_translations
from bookstore.domain.entities import Category
from bookstore.domain.exceptions import CategoryNameConflictError, CategoryNotFoundError

if TYPE_CHECKING:
    from bookstore.application.categories.ports import CategoryCommandGateway, CategoryReader
    from bookstore.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class UpdateCategoryInteractor:
    """Partial category update. No ownership check applies to categories."""

    def __init__(
        self,
        category_reader: "CategoryReader",
        category_command: "CategoryCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._category_reader = category_reader
        self._category_command = category_command
        self._tx = transaction_manager

    async def execute(self, category_id: UUID, data: CategoryInput) -> Category:
        """Update a category.

        Raises:
            CategoryNotFoundError: no category has this id.
            CategoryNameConflictError: new name belongs to another category.
        """
        if await self._category_reader.get_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

        name = data.name.canonical or None
        if name is not None:
            existing = await self._category_reader.get_by_name(name)
            if existing is not None and existing.id != category_id:
                raise CategoryNameConflictError(name)

        values = CategoryValues(
            name=name,
            description=data.description.canonical or None,
            name_translations=merge_translations(data.name),
            description_translations=merge_translations(data.description),
        )
        try:
            await self._category_command.update(category_id, values)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info("Category updated", extra={"category_id": str(category_id)})

        category = await self._category_reader.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category
