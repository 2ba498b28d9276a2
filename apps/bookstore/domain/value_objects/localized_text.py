"""LocalizedText value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from bookstore.domain.enums.locale import Locale


@dataclass(frozen=True)
class LocalizedText:
    """Parallel-language text.

    Both locale keys always exist; an empty string means "no text for this
    language" and is resolved by falling back, never by dropping the key.
    """

    en: str = ""
    ar: str = ""

    def get(self, locale: Locale) -> str:
        return getattr(self, locale.value)

    def to_dict(self) -> dict[str, str]:
        return {"en": self.en, "ar": self.ar}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> LocalizedText | None:
        """Build from a stored JSON object; missing keys become empty strings."""
        if not data:
            return None
        return cls(en=data.get("en") or "", ar=data.get("ar") or "")
