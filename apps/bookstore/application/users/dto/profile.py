"""Profile DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bookstore.domain.entities import UserProfile


@dataclass(frozen=True)
class ProfileChanges:
    """Partial profile update. ``None`` leaves a field untouched.

    An empty first or last name clears it.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class UserStats:
    user: UserProfile
    total_books: int
    joined_date: datetime | None
    last_updated: datetime | None
