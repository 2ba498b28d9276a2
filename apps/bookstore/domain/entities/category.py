"""Category entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from bookstore.domain.value_objects import LocalizedText


@dataclass
class Category:
    """Book category. The name is unique across categories."""

    id: UUID
    name: str
    description: str | None = None
    name_translations: LocalizedText | None = None
    description_translations: LocalizedText | None = None
    created_at: datetime | None = None
