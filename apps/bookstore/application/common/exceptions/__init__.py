"""Application Exceptions."""

from bookstore.application.common.exceptions.base import ApplicationError
from bookstore.application.common.exceptions.validation import MissingCanonicalTextError

__all__ = ["ApplicationError", "MissingCanonicalTextError"]
