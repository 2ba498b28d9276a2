"""Category and tag schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from bookstore.application.categories.dto import CategoryInput
from bookstore.application.i18n import TextInput
from bookstore.domain.entities import Category, Tag
from bookstore.presentation.http.schemas.common import CamelModel, LocalizedTextSchema


class CategoryResponse(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    name_translations: Optional[LocalizedTextSchema] = None
    description_translations: Optional[LocalizedTextSchema] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, category: Category) -> CategoryResponse:
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            name_translations=LocalizedTextSchema.from_value(category.name_translations),
            description_translations=LocalizedTextSchema.from_value(
                category.description_translations
            ),
            created_at=category.created_at,
        )


class CategoryUpdateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    name_en: Optional[str] = Field(None, max_length=255)
    name_ar: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    description_en: Optional[str] = Field(None, max_length=1000)
    description_ar: Optional[str] = Field(None, max_length=1000)

    def to_input(self) -> CategoryInput:
        return CategoryInput(
            name=TextInput(self.name, self.name_en, self.name_ar),
            description=TextInput(self.description, self.description_en, self.description_ar),
        )


class CategoryCreateRequest(CategoryUpdateRequest):
    @model_validator(mode="after")
    def _require_name(self) -> CategoryCreateRequest:
        if not (self.name or self.name_en or self.name_ar):
            raise ValueError("name is required (name, nameEn or nameAr)")
        return self


class TagResponse(CamelModel):
    id: UUID
    name: str
    name_translations: Optional[LocalizedTextSchema] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, tag: Tag) -> TagResponse:
        return cls(
            id=tag.id,
            name=tag.name,
            name_translations=LocalizedTextSchema.from_value(tag.name_translations),
            created_at=tag.created_at,
        )


class TagCreateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    name_en: Optional[str] = Field(None, max_length=255)
    name_ar: Optional[str] = Field(None, max_length=255)

    @model_validator(mode="after")
    def _require_name(self) -> TagCreateRequest:
        if not (self.name or self.name_en or self.name_ar):
            raise ValueError("name is required (name, nameEn or nameAr)")
        return self

    def to_input(self) -> TextInput:
        return TextInput(self.name, self.name_en, self.name_ar)
