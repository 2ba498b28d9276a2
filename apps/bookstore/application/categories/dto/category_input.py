"""Category write DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field

from bookstore.application.i18n import TextInput
from bookstore.domain.value_objects import LocalizedText


@dataclass(frozen=True)
class CategoryInput:
    """Create or partial-update request for a category."""

    name: TextInput = field(default_factory=TextInput)
    description: TextInput = field(default_factory=TextInput)


@dataclass(frozen=True)
class CategoryValues:
    """Column values handed to the gateway; ``None`` is skipped on update."""

    name: str | None = None
    description: str | None = None
    name_translations: LocalizedText | None = None
    description_translations: LocalizedText | None = None
