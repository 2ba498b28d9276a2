"""Tag entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from bookstore.domain.value_objects import LocalizedText


@dataclass
class Tag:
    id: UUID
    name: str
    name_translations: LocalizedText | None = None
    created_at: datetime | None = None
