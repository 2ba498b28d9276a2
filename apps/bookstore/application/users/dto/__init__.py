"""User DTOs."""

from bookstore.application.users.dto.profile import ProfileChanges, UserStats

__all__ = ["ProfileChanges", "UserStats"]
