"""User account exceptions."""

from __future__ import annotations

from uuid import UUID

from bookstore.domain.exceptions.base import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: UUID | None = None) -> None:
        self.user_id = user_id
        super().__init__("User not found")


class EmailConflictError(ConflictError):
    """Email already registered to another account."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Email already exists")
