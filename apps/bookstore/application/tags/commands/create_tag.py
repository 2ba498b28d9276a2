"""Create Tag command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bookstore.application.common.exceptions import MissingCanonicalTextError
from bookstore.application.i18n import TextInput, canonical_text, merge_translations
from bookstore.domain.entities import Tag
from bookstore.domain.exceptions import TagNameConflictError

if TYPE_CHECKING:
    from bookstore.application.common.ports import TransactionManager
    from bookstore.application.tags.ports import TagCommandGateway, TagReader

logger = logging.getLogger(__name__)


class CreateTagInteractor:
    def __init__(
        self,
        tag_reader: "TagReader",
        tag_command: "TagCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._tag_reader = tag_reader
        self._tag_command = tag_command
        self._tx = transaction_manager

    async def execute(self, name: TextInput) -> Tag:
        """Create a tag.

        Raises:
            MissingCanonicalTextError: no name in any form.
            TagNameConflictError: name already taken.
        """
        canonical = canonical_text(name)
        if canonical is None:
            raise MissingCanonicalTextError("name")
        if await self._tag_reader.get_by_name(canonical) is not None:
            raise TagNameConflictError(canonical)

        try:
            tag = await self._tag_command.add(canonical, merge_translations(name))
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info("Tag created", extra={"tag_id": str(tag.id)})
        return tag
