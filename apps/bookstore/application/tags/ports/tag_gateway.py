"""Tag Command Gateway Port."""

from __future__ import annotations

from typing import Protocol

from bookstore.domain.entities import Tag
from bookstore.domain.value_objects import LocalizedText


class TagCommandGateway(Protocol):
    async def add(self, name: str, name_translations: LocalizedText | None) -> Tag:
        ...
