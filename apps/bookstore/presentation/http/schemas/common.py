"""Shared response schemas: the envelope and pagination."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from bookstore.application.common.dto import PaginationMeta
from bookstore.domain.value_objects import LocalizedText

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LocalizedTextSchema(BaseModel):
    en: str
    ar: str

    @classmethod
    def from_value(cls, text: LocalizedText | None) -> Optional[LocalizedTextSchema]:
        return cls(en=text.en, ar=text.ar) if text is not None else None


class PaginationSchema(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> PaginationSchema:
        return cls(
            page=meta.page,
            limit=meta.limit,
            total=meta.total,
            total_pages=meta.total_pages,
            has_next=meta.has_next,
            has_prev=meta.has_prev,
        )


class ApiResponse(CamelModel, Generic[DataT]):
    """``{success, message, data?, pagination?, locale?}``.

    Routes serialize with ``response_model_exclude_none`` so absent members
    are omitted rather than sent as null.
    """

    success: bool = True
    message: str
    data: Optional[DataT] = None
    pagination: Optional[PaginationSchema] = None
    locale: Optional[str] = None
