"""User Reader Port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from bookstore.domain.entities import AuthUser


class UserReader(Protocol):
    async def get_by_id(self, user_id: UUID) -> AuthUser | None:
        ...
