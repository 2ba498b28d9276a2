"""Book Ports."""

from bookstore.application.books.ports.book_gateway import BookCommandGateway
from bookstore.application.books.ports.book_reader import BookReader

__all__ = ["BookCommandGateway", "BookReader"]
