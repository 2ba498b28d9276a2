"""Domain Exceptions."""

from bookstore.domain.exceptions.auth import InvalidTokenError, TokenExpiredError
from bookstore.domain.exceptions.base import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)
from bookstore.domain.exceptions.catalog import (
    BookNotFoundError,
    BookOwnershipError,
    CategoryInUseError,
    CategoryNameConflictError,
    CategoryNotFoundError,
    TagNameConflictError,
    TagNotFoundError,
)
from bookstore.domain.exceptions.user import EmailConflictError, UserNotFoundError

__all__ = [
    "BookNotFoundError",
    "BookOwnershipError",
    "CategoryInUseError",
    "CategoryNameConflictError",
    "CategoryNotFoundError",
    "ConflictError",
    "DomainError",
    "EmailConflictError",
    "ForbiddenError",
    "InvalidTokenError",
    "NotFoundError",
    "TagNameConflictError",
    "TagNotFoundError",
    "TokenExpiredError",
    "UserNotFoundError",
]
