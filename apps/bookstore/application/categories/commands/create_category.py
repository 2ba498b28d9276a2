"""Create Category command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bookstore.application.categories.dto import CategoryInput, CategoryValues
from bookstore.application.common.exceptions import MissingCanonicalTextError
from bookstore.application.i18n import canonical_text, merge_translations
from bookstore.domain.entities import Category
from bookstore.domain.exceptions import CategoryNameConflictError

if TYPE_CHECKING:
    from bookstore.application.categories.ports import CategoryCommandGateway, CategoryReader
    from bookstore.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class CreateCategoryInteractor:
    def __init__(
        self,
        category_reader: "CategoryReader",
        category_command: "CategoryCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._category_reader = category_reader
        self._category_command = category_command
        self._tx = transaction_manager

    async def execute(self, data: CategoryInput) -> Category:
        """Create a category.

        Raises:
            MissingCanonicalTextError: no name in any form.
            CategoryNameConflictError: name already taken.
        """
        name = canonical_text(data.name)
        if name is None:
            raise MissingCanonicalTextError("name")
        if await self._category_reader.get_by_name(name) is not None:
            raise CategoryNameConflictError(name)

        values = CategoryValues(
            name=name,
            description=canonical_text(data.description),
            name_translations=merge_translations(data.name),
            description_translations=merge_translations(data.description),
        )
        try:
            category = await self._category_command.add(values)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info("Category created", extra={"category_id": str(category.id)})
        return category
