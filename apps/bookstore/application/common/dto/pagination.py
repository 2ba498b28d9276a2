"""Pagination DTOs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationMeta:
    """Pagination metadata of one filtered page."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> PaginationMeta:
        """Compute metadata from the filtered total.

        ``has_next`` holds exactly when ``page * limit < total``.
        """
        total_pages = math.ceil(total / limit) if limit > 0 else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page * limit < total,
            has_prev=page > 1,
        )


@dataclass
class Page(Generic[T]):
    items: list[T]
    pagination: PaginationMeta
