"""List Tags Query."""

from __future__ import annotations

from bookstore.application.i18n import localize_tag
from bookstore.application.tags.ports import TagReader
from bookstore.domain.entities import Tag
from bookstore.domain.enums import Locale


class ListTagsQuery:
    def __init__(self, reader: TagReader) -> None:
        self._reader = reader

    async def execute(self, locale: Locale) -> list[Tag]:
        return [localize_tag(tag, locale) for tag in await self._reader.list_all()]
