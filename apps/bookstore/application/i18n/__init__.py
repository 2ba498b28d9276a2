"""Localization: locale resolution, projection and translation input."""

from bookstore.application.i18n.locale_resolver import resolve_locale
from bookstore.application.i18n.projector import (
    localize_book,
    localize_category,
    localize_tag,
    resolve_text,
)
from bookstore.application.i18n.translations import TextInput, canonical_text, merge_translations

__all__ = [
    "TextInput",
    "canonical_text",
    "localize_book",
    "localize_category",
    "localize_tag",
    "merge_translations",
    "resolve_locale",
    "resolve_text",
]
