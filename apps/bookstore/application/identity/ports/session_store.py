"""Session Store Port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID


class SessionStore(Protocol):
    """Server-side record of each user's current bearer token."""

    async def save(self, user_id: UUID, token: str, ttl_seconds: int) -> None:
        ...

    async def matches(self, user_id: UUID, token: str) -> bool:
        """True when ``token`` is the user's current session token."""
        ...

    async def revoke(self, user_id: UUID) -> None:
        ...
