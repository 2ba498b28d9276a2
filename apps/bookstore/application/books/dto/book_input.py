"""Book write DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from bookstore.application.i18n import TextInput
from bookstore.domain.value_objects import LocalizedText


@dataclass(frozen=True)
class BookDraft:
    """Create request, as received from the caller."""

    title: TextInput
    price: Decimal
    category_id: UUID
    description: TextInput = field(default_factory=TextInput)
    thumbnail: str | None = None
    tag_ids: list[UUID] = field(default_factory=list)


@dataclass(frozen=True)
class BookChanges:
    """Partial update request. ``None`` leaves a field untouched.

    ``clear_thumbnail`` removes the stored thumbnail; it wins over ``thumbnail``.
    """

    title: TextInput = field(default_factory=TextInput)
    description: TextInput = field(default_factory=TextInput)
    price: Decimal | None = None
    thumbnail: str | None = None
    category_id: UUID | None = None
    tag_ids: list[UUID] | None = None
    clear_thumbnail: bool = False


@dataclass(frozen=True)
class NewBook:
    """Row values handed to the gateway on create."""

    author_id: UUID
    title: str
    price: Decimal
    category_id: UUID
    description: str | None = None
    title_translations: LocalizedText | None = None
    description_translations: LocalizedText | None = None
    thumbnail: str | None = None
    tag_ids: list[UUID] = field(default_factory=list)


@dataclass(frozen=True)
class BookPatch:
    """Column values handed to the gateway on update; ``None`` is skipped.

    ``tag_ids`` is either None (keep the current tag set) or the full
    replacement set. ``clear_thumbnail`` sets the thumbnail column to NULL.
    """

    title: str | None = None
    description: str | None = None
    title_translations: LocalizedText | None = None
    description_translations: LocalizedText | None = None
    price: Decimal | None = None
    thumbnail: str | None = None
    category_id: UUID | None = None
    tag_ids: list[UUID] | None = None
    clear_thumbnail: bool = False
