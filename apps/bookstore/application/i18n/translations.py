"""Write-side counterpart of the projector.

Turns the per-language inputs of a create/update request (``titleEn``,
``titleAr``, ...) plus the optional canonical value into what gets stored.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.value_objects import LocalizedText


@dataclass(frozen=True)
class TextInput:
    """One translatable field as supplied by a caller. ``None`` means absent."""

    canonical: str | None = None
    en: str | None = None
    ar: str | None = None

    @property
    def has_translations(self) -> bool:
        return bool(self.en or self.ar)

    @property
    def is_empty(self) -> bool:
        return not (self.canonical or self.en or self.ar)


def merge_translations(text: TextInput) -> LocalizedText | None:
    """Build the parallel-language object, or None if no language was given.

    Each missing language is filled from the canonical input, then with an
    empty string. Supplying one language without a canonical value therefore
    stores a partial object; the projector falls back over the empty key.
    """
    if not text.has_translations:
        return None
    filler = text.canonical or ""
    return LocalizedText(en=text.en or filler, ar=text.ar or filler)


def canonical_text(text: TextInput) -> str | None:
    """Canonical value to store on create: explicit value, else en, else ar."""
    return text.canonical or text.en or text.ar or None
