"""Redis Session Store.

One key per user holds the single token currently accepted for that user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    import redis.asyncio as aioredis

AUTH_TOKEN_KEY_PREFIX = "auth_token:"


def session_key(user_id: UUID) -> str:
    return f"{AUTH_TOKEN_KEY_PREFIX}{user_id}"


class RedisSessionStore:
    """SessionStore implementation."""

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def save(self, user_id: UUID, token: str, ttl_seconds: int) -> None:
        await self._redis.setex(session_key(user_id), max(ttl_seconds, 1), token)

    async def matches(self, user_id: UUID, token: str) -> bool:
        stored = await self._redis.get(session_key(user_id))
        return stored is not None and stored == token

    async def revoke(self, user_id: UUID) -> None:
        await self._redis.delete(session_key(user_id))
