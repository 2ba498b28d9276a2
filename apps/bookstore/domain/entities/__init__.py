"""Domain Entities."""

from bookstore.domain.entities.book import AuthorSummary, Book, CategorySummary, TagSummary
from bookstore.domain.entities.category import Category
from bookstore.domain.entities.tag import Tag
from bookstore.domain.entities.user import AuthUser, UserProfile

__all__ = [
    "AuthUser",
    "AuthorSummary",
    "Book",
    "Category",
    "CategorySummary",
    "Tag",
    "TagSummary",
    "UserProfile",
]
