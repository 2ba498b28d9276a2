"""ORM model -> domain entity mapping."""

from __future__ import annotations

from bookstore.domain.entities import (
    AuthorSummary,
    Book,
    Category,
    CategorySummary,
    Tag,
    TagSummary,
    UserProfile,
)
from bookstore.domain.value_objects import LocalizedText
from bookstore.infrastructure.persistence_postgres.models import (
    BookModel,
    CategoryModel,
    TagModel,
    UserModel,
)


def book_to_domain(model: BookModel) -> Book:
    """Map a book loaded with author, category and tags."""
    return Book(
        id=model.id,
        title=model.title,
        description=model.description,
        title_translations=LocalizedText.from_dict(model.title_translations),
        description_translations=LocalizedText.from_dict(model.description_translations),
        price=model.price,
        thumbnail=model.thumbnail,
        author_id=model.author_id,
        category_id=model.category_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
        author=_author_summary(model.author) if model.author else None,
        category=_category_summary(model.category) if model.category else None,
        tags=[_tag_summary(tag) for tag in sorted(model.tags, key=lambda t: t.name)],
    )


def category_to_domain(model: CategoryModel) -> Category:
    return Category(
        id=model.id,
        name=model.name,
        description=model.description,
        name_translations=LocalizedText.from_dict(model.name_translations),
        description_translations=LocalizedText.from_dict(model.description_translations),
        created_at=model.created_at,
    )


def tag_to_domain(model: TagModel) -> Tag:
    return Tag(
        id=model.id,
        name=model.name,
        name_translations=LocalizedText.from_dict(model.name_translations),
        created_at=model.created_at,
    )


def user_to_profile(model: UserModel) -> UserProfile:
    return UserProfile(
        id=model.id,
        username=model.username,
        email=model.email,
        first_name=model.first_name,
        last_name=model.last_name,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def translations_to_json(text: LocalizedText | None) -> dict[str, str] | None:
    return text.to_dict() if text is not None else None


def _author_summary(model: UserModel) -> AuthorSummary:
    return AuthorSummary(
        id=model.id,
        username=model.username,
        first_name=model.first_name,
        last_name=model.last_name,
    )


def _category_summary(model: CategoryModel) -> CategorySummary:
    return CategorySummary(
        id=model.id,
        name=model.name,
        description=model.description,
        name_translations=LocalizedText.from_dict(model.name_translations),
        description_translations=LocalizedText.from_dict(model.description_translations),
    )


def _tag_summary(model: TagModel) -> TagSummary:
    return TagSummary(
        id=model.id,
        name=model.name,
        name_translations=LocalizedText.from_dict(model.name_translations),
    )
