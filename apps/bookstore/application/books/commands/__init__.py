"""Book Commands."""

from bookstore.application.books.commands.create_book import CreateBookInteractor
from bookstore.application.books.commands.delete_book import DeleteBookInteractor
from bookstore.application.books.commands.update_book import UpdateBookInteractor

__all__ = ["CreateBookInteractor", "DeleteBookInteractor", "UpdateBookInteractor"]
