"""ORM to domain mapping tests (no database)."""

from __future__ import annotations

import uuid
from decimal import Decimal

from bookstore.domain.value_objects import LocalizedText
from bookstore.infrastructure.persistence_postgres.mappers import (
    book_to_domain,
    category_to_domain,
    translations_to_json,
)
from bookstore.infrastructure.persistence_postgres.models import (
    BookModel,
    CategoryModel,
    TagModel,
    UserModel,
)


def _book_model(**overrides) -> BookModel:
    author = UserModel(
        id=uuid.uuid4(), username="layla", email="layla@example.com", password="x"
    )
    category = CategoryModel(id=uuid.uuid4(), name="Programming")
    values = dict(
        id=uuid.uuid4(),
        title="Clean Code",
        description=None,
        title_translations={"en": "Clean Code", "ar": "الكود النظيف"},
        description_translations=None,
        price=Decimal("29.90"),
        author_id=author.id,
        category_id=category.id,
        author=author,
        category=category,
        tags=[
            TagModel(id=uuid.uuid4(), name="classic"),
            TagModel(id=uuid.uuid4(), name="agile"),
        ],
    )
    values.update(overrides)
    return BookModel(**values)


class TestBookToDomain:
    def test_translations_become_value_objects(self) -> None:
        book = book_to_domain(_book_model())

        assert book.title_translations == LocalizedText(en="Clean Code", ar="الكود النظيف")
        assert book.description_translations is None

    def test_partial_translation_object_fills_missing_key(self) -> None:
        book = book_to_domain(_book_model(title_translations={"en": "Clean Code"}))

        assert book.title_translations == LocalizedText(en="Clean Code", ar="")

    def test_relations_and_tag_order(self) -> None:
        book = book_to_domain(_book_model())

        assert book.author is not None
        assert book.author.username == "layla"
        assert book.category is not None
        assert book.category.name == "Programming"
        assert [tag.name for tag in book.tags] == ["agile", "classic"]

    def test_price_is_kept_exact(self) -> None:
        assert book_to_domain(_book_model(price=Decimal("0.10"))).price_text == "0.10"


def test_category_without_translations() -> None:
    category = category_to_domain(CategoryModel(id=uuid.uuid4(), name="Fiction"))

    assert category.name_translations is None
    assert category.description is None


def test_translations_to_json() -> None:
    assert translations_to_json(None) is None
    assert translations_to_json(LocalizedText(en="a", ar="ب")) == {"en": "a", "ar": "ب"}
