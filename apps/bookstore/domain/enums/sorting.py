"""Catalog sort options."""

from enum import Enum


class BookSortField(str, Enum):
    """Sortable book fields (wire names)."""

    TITLE = "title"
    PRICE = "price"
    CREATED_AT = "createdAt"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
