"""Domain Enums."""

from bookstore.domain.enums.locale import DEFAULT_LOCALE, Locale
from bookstore.domain.enums.sorting import BookSortField, SortOrder

__all__ = ["Locale", "DEFAULT_LOCALE", "BookSortField", "SortOrder"]
