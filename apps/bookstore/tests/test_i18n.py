"""Locale resolution, projection and translation input tests."""

from __future__ import annotations

import pytest

from bookstore.application.i18n import (
    TextInput,
    canonical_text,
    localize_book,
    localize_category,
    localize_tag,
    merge_translations,
    resolve_locale,
    resolve_text,
)
from bookstore.domain.entities import Book, Category, Tag
from bookstore.domain.enums import DEFAULT_LOCALE, Locale
from bookstore.domain.value_objects import LocalizedText


class TestResolveLocale:
    """resolve_locale tests."""

    @pytest.mark.parametrize("lang", ["en", "ar"])
    def test_explicit_supported_lang_wins(self, lang: str) -> None:
        """A supported ?lang= beats the header."""
        other = "ar" if lang == "en" else "en"
        assert resolve_locale(lang, other) == Locale(lang)

    @pytest.mark.parametrize("lang", [None, "", "fr", "EN-us", "arabic", " ar"])
    def test_unsupported_lang_without_header_falls_back_to_default(
        self, lang: str | None
    ) -> None:
        assert resolve_locale(lang, None) == DEFAULT_LOCALE == Locale.EN

    def test_unsupported_lang_uses_header(self) -> None:
        assert resolve_locale("fr", "ar") == Locale.AR

    def test_header_region_and_quality_are_ignored(self) -> None:
        assert resolve_locale(None, "ar-EG;q=0.9") == Locale.AR

    def test_header_first_supported_entry_wins(self) -> None:
        """Header order is kept; quality values are not used for ranking."""
        assert resolve_locale(None, "fr-FR, de;q=0.9, ar-SA;q=0.8, en;q=0.7") == Locale.AR

    def test_header_is_case_insensitive(self) -> None:
        assert resolve_locale(None, " AR-eg ") == Locale.AR

    @pytest.mark.parametrize("header", ["", ",,,", ";q=1", "*", "zz-ZZ;q=abc", "-"])
    def test_malformed_header_degrades_to_default(self, header: str) -> None:
        assert resolve_locale(None, header) == Locale.EN

    def test_custom_default(self) -> None:
        assert resolve_locale(None, "fr", default=Locale.AR) == Locale.AR


class TestResolveText:
    """Fallback chain: locale -> en -> canonical -> default."""

    def test_requested_locale(self) -> None:
        text = LocalizedText(en="Hello", ar="مرحبا")
        assert resolve_text(text, Locale.AR, "canonical") == "مرحبا"

    def test_empty_locale_falls_back_to_default_locale(self) -> None:
        text = LocalizedText(en="Hello", ar="")
        assert resolve_text(text, Locale.AR, "canonical") == "Hello"

    def test_empty_translations_fall_back_to_canonical(self) -> None:
        text = LocalizedText(en="", ar="")
        assert resolve_text(text, Locale.AR, "canonical") == "canonical"

    def test_no_translations_uses_canonical(self) -> None:
        assert resolve_text(None, Locale.AR, "canonical") == "canonical"

    def test_everything_empty_uses_caller_default(self) -> None:
        assert resolve_text(None, Locale.EN, "", "") == ""
        assert resolve_text(LocalizedText(), Locale.AR, None, "n/a") == "n/a"
        assert resolve_text(None, Locale.EN, None) is None


class TestLocalizeBook:
    """Projector tests on books."""

    @pytest.mark.parametrize("locale", list(Locale))
    def test_title_matches_translation_when_present(
        self, sample_book: Book, locale: Locale
    ) -> None:
        projected = localize_book(sample_book, locale)
        assert sample_book.title_translations is not None
        assert projected.title == sample_book.title_translations.get(locale)

    def test_arabic_description_falls_back_to_english(self, sample_book: Book) -> None:
        projected = localize_book(sample_book, Locale.AR)
        assert projected.description == "A handbook of agile software craftsmanship"

    def test_translations_are_retained(self, sample_book: Book) -> None:
        projected = localize_book(sample_book, Locale.AR)
        assert projected.title_translations == sample_book.title_translations
        assert projected.description_translations == sample_book.description_translations

    def test_nested_category_and_tags_are_projected(self, sample_book: Book) -> None:
        projected = localize_book(sample_book, Locale.AR)
        assert projected.category is not None
        assert projected.category.name == "برمجة"
        assert projected.tags[0].name == "الأكثر مبيعا"

    def test_legacy_book_uses_canonical_fields(self, legacy_book: Book) -> None:
        projected = localize_book(legacy_book, Locale.AR)
        assert projected.title == "The Pragmatic Programmer"
        assert projected.description == ""

    def test_source_record_is_not_mutated(self, sample_book: Book) -> None:
        localize_book(sample_book, Locale.AR)
        assert sample_book.title == "Clean Code"

    @pytest.mark.parametrize("locale", list(Locale))
    def test_projection_is_idempotent(
        self, sample_book: Book, legacy_book: Book, locale: Locale
    ) -> None:
        for book in (sample_book, legacy_book):
            once = localize_book(book, locale)
            assert localize_book(once, locale) == once


class TestLocalizeCategoryAndTag:
    def test_category(self, sample_category: Category) -> None:
        projected = localize_category(sample_category, Locale.AR)
        assert projected.name == "برمجة"
        assert projected.description == "كتب عن البرمجيات"
        assert localize_category(projected, Locale.AR) == projected

    def test_category_without_description(self, sample_category: Category) -> None:
        bare = Category(id=sample_category.id, name="Fiction")
        projected = localize_category(bare, Locale.AR)
        assert projected.name == "Fiction"
        assert projected.description is None

    def test_tag(self, sample_tag: Tag) -> None:
        assert localize_tag(sample_tag, Locale.EN).name == "Bestseller"
        assert localize_tag(sample_tag, Locale.AR).name == "الأكثر مبيعا"


class TestMergeTranslations:
    """Write-side translation building."""

    def test_both_languages(self) -> None:
        assert merge_translations(TextInput(en="A", ar="ب")) == LocalizedText(en="A", ar="ب")

    def test_missing_language_filled_from_canonical(self) -> None:
        merged = merge_translations(TextInput(canonical="Canonical", ar="عربي"))
        assert merged == LocalizedText(en="Canonical", ar="عربي")

    def test_single_language_without_canonical_is_partial(self) -> None:
        merged = merge_translations(TextInput(en="Only English"))
        assert merged == LocalizedText(en="Only English", ar="")

    def test_canonical_only_builds_no_object(self) -> None:
        assert merge_translations(TextInput(canonical="Title")) is None

    def test_empty_strings_count_as_absent(self) -> None:
        assert merge_translations(TextInput(canonical="Title", en="", ar="")) is None

    def test_canonical_text_priority(self) -> None:
        assert canonical_text(TextInput(canonical="C", en="E", ar="A")) == "C"
        assert canonical_text(TextInput(en="E", ar="A")) == "E"
        assert canonical_text(TextInput(ar="A")) == "A"
        assert canonical_text(TextInput()) is None
