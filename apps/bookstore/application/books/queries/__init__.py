"""Book Queries."""

from bookstore.application.books.queries.get_book import GetBookQuery
from bookstore.application.books.queries.list_books import ListBooksQuery, ListMyBooksQuery

__all__ = ["GetBookQuery", "ListBooksQuery", "ListMyBooksQuery"]
