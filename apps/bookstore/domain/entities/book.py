"""Book entity - catalog record."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from bookstore.domain.value_objects import LocalizedText

PRICE_QUANTUM = Decimal("0.01")


@dataclass
class AuthorSummary:
    """Public fields of a book's author."""

    id: UUID
    username: str
    first_name: str | None = None
    last_name: str | None = None


@dataclass
class CategorySummary:
    """Public fields of a book's category."""

    id: UUID
    name: str
    description: str | None = None
    name_translations: LocalizedText | None = None
    description_translations: LocalizedText | None = None


@dataclass
class TagSummary:
    id: UUID
    name: str
    name_translations: LocalizedText | None = None


@dataclass
class Book:
    """Book entity.

    ``title``/``description`` are the canonical single-language fields and the
    last fallback when a translation is missing. The ``*_translations``
    objects are optional; when present they carry both locale keys.
    """

    id: UUID
    title: str
    price: Decimal
    author_id: UUID
    category_id: UUID
    description: str | None = None
    title_translations: LocalizedText | None = None
    description_translations: LocalizedText | None = None
    thumbnail: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: AuthorSummary | None = None
    category: CategorySummary | None = None
    tags: list[TagSummary] = field(default_factory=list)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.author_id == user_id

    @property
    def price_text(self) -> str:
        """Price as a non-negative decimal string with two fraction digits."""
        return str(Decimal(self.price).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP))
