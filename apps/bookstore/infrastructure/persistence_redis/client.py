"""Redis client factory for the session store.

The application lifespan builds the client and closes it on shutdown.
No retry policy is configured on top of the client defaults; a connection
error or timeout surfaces to the request. Idle connections are
health-checked before reuse.
"""

from __future__ import annotations

import redis.asyncio as aioredis

HEALTH_CHECK_INTERVAL_SECONDS = 30
CONNECT_TIMEOUT_SECONDS = 5.0
COMMAND_TIMEOUT_SECONDS = 5.0


def build_async_client(redis_url: str, *, max_connections: int = 50) -> aioredis.Redis:
    """Create a pooled client that returns ``str`` values."""
    return aioredis.from_url(
        redis_url,
        decode_responses=True,
        socket_keepalive=True,
        socket_connect_timeout=CONNECT_TIMEOUT_SECONDS,
        socket_timeout=COMMAND_TIMEOUT_SECONDS,
        health_check_interval=HEALTH_CHECK_INTERVAL_SECONDS,
        max_connections=max_connections,
    )
