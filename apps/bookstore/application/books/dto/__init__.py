"""Book DTOs."""

from bookstore.application.books.dto.book_input import BookChanges, BookDraft, BookPatch, NewBook
from bookstore.application.books.dto.search_criteria import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    BookSearchCriteria,
)

__all__ = [
    "BookChanges",
    "BookDraft",
    "BookPatch",
    "BookSearchCriteria",
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MAX_LIMIT",
    "NewBook",
]
