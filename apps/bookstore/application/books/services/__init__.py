"""Book Services."""

from bookstore.application.books.services.reference_checker import BookReferenceChecker

__all__ = ["BookReferenceChecker"]
