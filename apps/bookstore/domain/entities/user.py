"""User entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AuthUser:
    """Identity resolved from a bearer token.

    Only ownership comparisons are made against it; credentials are checked
    by the identity service that issued the token.
    """

    id: UUID
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None


@dataclass
class UserProfile:
    """Public account record, without the password hash."""

    id: UUID
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
