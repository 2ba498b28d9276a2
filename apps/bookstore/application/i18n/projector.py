"""Localization projector.

Reduces parallel-language records to one display language. The projected
record keeps its ``*_translations`` objects so edit forms can still show
every language, which also makes projection idempotent: projecting an
already-projected record with the same locale returns the same values.
"""

from __future__ import annotations

from dataclasses import replace

from bookstore.domain.entities import Book, Category, CategorySummary, Tag, TagSummary
from bookstore.domain.enums import DEFAULT_LOCALE, Locale
from bookstore.domain.value_objects import LocalizedText


def resolve_text(
    translations: LocalizedText | None,
    locale: Locale,
    canonical: str | None,
    default: str | None = None,
) -> str | None:
    """Resolve one field for ``locale``.

    Fallback order: ``translations[locale]``, ``translations[en]``,
    ``canonical``, ``default``. Empty strings count as missing.
    """
    if translations is not None:
        value = translations.get(locale) or translations.get(DEFAULT_LOCALE)
        if value:
            return value
    return canonical or default


def localize_category_summary(category: CategorySummary, locale: Locale) -> CategorySummary:
    return replace(
        category,
        name=resolve_text(category.name_translations, locale, category.name, ""),
        description=resolve_text(
            category.description_translations, locale, category.description
        ),
    )


def localize_tag_summary(tag: TagSummary, locale: Locale) -> TagSummary:
    return replace(tag, name=resolve_text(tag.name_translations, locale, tag.name, ""))


def localize_book(book: Book, locale: Locale) -> Book:
    """Project a book, its category and its tags to ``locale``."""
    return replace(
        book,
        title=resolve_text(book.title_translations, locale, book.title, ""),
        description=resolve_text(book.description_translations, locale, book.description, ""),
        category=(
            localize_category_summary(book.category, locale) if book.category else None
        ),
        tags=[localize_tag_summary(tag, locale) for tag in book.tags],
    )


def localize_category(category: Category, locale: Locale) -> Category:
    return replace(
        category,
        name=resolve_text(category.name_translations, locale, category.name, ""),
        description=resolve_text(
            category.description_translations, locale, category.description
        ),
    )


def localize_tag(tag: Tag, locale: Locale) -> Tag:
    return replace(tag, name=resolve_text(tag.name_translations, locale, tag.name, ""))
