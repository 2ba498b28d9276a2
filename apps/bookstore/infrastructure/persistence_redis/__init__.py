"""Redis Infrastructure."""

from bookstore.infrastructure.persistence_redis.client import build_async_client
from bookstore.infrastructure.persistence_redis.session_store_redis import (
    AUTH_TOKEN_KEY_PREFIX,
    RedisSessionStore,
)

__all__ = ["AUTH_TOKEN_KEY_PREFIX", "RedisSessionStore", "build_async_client"]
