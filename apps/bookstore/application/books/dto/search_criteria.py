"""Book search criteria DTO."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from uuid import UUID

from bookstore.domain.enums import BookSortField, SortOrder

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class BookSearchCriteria:
    """Filter, sort and pagination parameters of a catalog listing.

    All filters are conjunctive. ``author_id`` is never taken from the
    request; only the "my books" listing sets it.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: str | None = None
    category_id: UUID | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    sort_by: BookSortField = BookSortField.TITLE
    sort_order: SortOrder = SortOrder.ASC
    author_id: UUID | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def for_author(self, author_id: UUID) -> BookSearchCriteria:
        return replace(self, author_id=author_id)
