"""Book request/response schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field, HttpUrl, field_validator, model_validator

from bookstore.application.books.dto import BookChanges, BookDraft
from bookstore.application.i18n import TextInput
from bookstore.domain.entities import AuthorSummary, Book, CategorySummary, TagSummary
from bookstore.presentation.http.schemas.common import CamelModel, LocalizedTextSchema

MAX_PRICE = Decimal("9999999.99")
MAX_THUMBNAIL_LENGTH = 500


class AuthorSchema(CamelModel):
    id: UUID
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def from_entity(cls, author: AuthorSummary) -> AuthorSchema:
        return cls(
            id=author.id,
            username=author.username,
            first_name=author.first_name,
            last_name=author.last_name,
        )


class BookCategorySchema(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    name_translations: Optional[LocalizedTextSchema] = None
    description_translations: Optional[LocalizedTextSchema] = None

    @classmethod
    def from_entity(cls, category: CategorySummary) -> BookCategorySchema:
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            name_translations=LocalizedTextSchema.from_value(category.name_translations),
            description_translations=LocalizedTextSchema.from_value(
                category.description_translations
            ),
        )


class BookTagSchema(CamelModel):
    id: UUID
    name: str
    name_translations: Optional[LocalizedTextSchema] = None

    @classmethod
    def from_entity(cls, tag: TagSummary) -> BookTagSchema:
        return cls(
            id=tag.id,
            name=tag.name,
            name_translations=LocalizedTextSchema.from_value(tag.name_translations),
        )


class BookResponse(CamelModel):
    """A book projected to one locale; translation objects are kept for edit UIs."""

    id: UUID
    title: str
    description: Optional[str] = None
    price: str
    thumbnail: Optional[str] = None
    author_id: UUID
    category_id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    title_translations: Optional[LocalizedTextSchema] = None
    description_translations: Optional[LocalizedTextSchema] = None
    author: Optional[AuthorSchema] = None
    category: Optional[BookCategorySchema] = None
    tags: list[BookTagSchema] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, book: Book) -> BookResponse:
        return cls(
            id=book.id,
            title=book.title,
            description=book.description,
            price=book.price_text,
            thumbnail=book.thumbnail,
            author_id=book.author_id,
            category_id=book.category_id,
            created_at=book.created_at,
            updated_at=book.updated_at,
            title_translations=LocalizedTextSchema.from_value(book.title_translations),
            description_translations=LocalizedTextSchema.from_value(
                book.description_translations
            ),
            author=AuthorSchema.from_entity(book.author) if book.author else None,
            category=BookCategorySchema.from_entity(book.category) if book.category else None,
            tags=[BookTagSchema.from_entity(tag) for tag in book.tags],
        )


def _check_thumbnail(value: Optional[HttpUrl]) -> Optional[HttpUrl]:
    if value is not None and len(str(value)) > MAX_THUMBNAIL_LENGTH:
        raise ValueError(f"thumbnail must be at most {MAX_THUMBNAIL_LENGTH} characters")
    return value


class BookCreateRequest(CamelModel):
    """Create payload. A title is required in at least one form."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    title_en: Optional[str] = Field(None, max_length=255)
    title_ar: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    description_en: Optional[str] = Field(None, max_length=2000)
    description_ar: Optional[str] = Field(None, max_length=2000)
    price: Decimal = Field(..., ge=0, le=MAX_PRICE, decimal_places=2)
    thumbnail: Optional[HttpUrl] = None
    category_id: UUID
    tags: Optional[list[UUID]] = None

    @field_validator("thumbnail")
    @classmethod
    def _check_thumbnail_length(cls, value: Optional[HttpUrl]) -> Optional[HttpUrl]:
        return _check_thumbnail(value)

    @model_validator(mode="after")
    def _require_title(self) -> BookCreateRequest:
        if not (self.title or self.title_en or self.title_ar):
            raise ValueError("title is required (title, titleEn or titleAr)")
        return self

    def to_draft(self) -> BookDraft:
        return BookDraft(
            title=TextInput(self.title, self.title_en, self.title_ar),
            description=TextInput(self.description, self.description_en, self.description_ar),
            price=self.price,
            thumbnail=str(self.thumbnail) if self.thumbnail else None,
            category_id=self.category_id,
            tag_ids=list(self.tags or []),
        )


class BookUpdateRequest(CamelModel):
    """Partial update payload; omitted fields are left unchanged.

    An explicit ``"thumbnail": null`` removes the thumbnail.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    title_en: Optional[str] = Field(None, max_length=255)
    title_ar: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    description_en: Optional[str] = Field(None, max_length=2000)
    description_ar: Optional[str] = Field(None, max_length=2000)
    price: Optional[Decimal] = Field(None, ge=0, le=MAX_PRICE, decimal_places=2)
    thumbnail: Optional[HttpUrl] = None
    category_id: Optional[UUID] = None
    tags: Optional[list[UUID]] = None

    @field_validator("thumbnail")
    @classmethod
    def _check_thumbnail_length(cls, value: Optional[HttpUrl]) -> Optional[HttpUrl]:
        return _check_thumbnail(value)

    def to_changes(self) -> BookChanges:
        return BookChanges(
            title=TextInput(self.title, self.title_en, self.title_ar),
            description=TextInput(self.description, self.description_en, self.description_ar),
            price=self.price,
            thumbnail=str(self.thumbnail) if self.thumbnail else None,
            category_id=self.category_id,
            tag_ids=list(self.tags) if self.tags is not None else None,
            clear_thumbnail="thumbnail" in self.model_fields_set and self.thumbnail is None,
        )
