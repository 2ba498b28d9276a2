"""Authentication domain exceptions."""

from bookstore.domain.exceptions.base import DomainError


class InvalidTokenError(DomainError):
    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(DomainError):
    def __init__(self) -> None:
        super().__init__("Token expired")
