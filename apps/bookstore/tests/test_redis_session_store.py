"""RedisSessionStore tests with a mocked Redis client."""

from __future__ import annotations

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from bookstore.infrastructure.persistence_redis import (
    AUTH_TOKEN_KEY_PREFIX,
    RedisSessionStore,
)


class TestRedisSessionStore:
    @pytest.fixture
    def mock_redis(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def store(self, mock_redis: AsyncMock) -> RedisSessionStore:
        return RedisSessionStore(mock_redis)

    @pytest.mark.asyncio
    async def test_save_uses_ttl(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        # Arrange
        user_id = uuid4()

        # Act
        await store.save(user_id, "token-abc", ttl_seconds=3600)

        # Assert
        mock_redis.setex.assert_awaited_once_with(
            f"{AUTH_TOKEN_KEY_PREFIX}{user_id}", 3600, "token-abc"
        )

    @pytest.mark.asyncio
    async def test_save_clamps_non_positive_ttl(
        self, store: RedisSessionStore, mock_redis: AsyncMock
    ) -> None:
        await store.save(uuid4(), "token-abc", ttl_seconds=0)

        assert mock_redis.setex.await_args.args[1] == 1

    @pytest.mark.asyncio
    async def test_matches_current_token(
        self, store: RedisSessionStore, mock_redis: AsyncMock
    ) -> None:
        user_id = uuid4()
        mock_redis.get.return_value = "token-abc"

        assert await store.matches(user_id, "token-abc") is True
        mock_redis.get.assert_awaited_once_with(f"auth_token:{user_id}")

    @pytest.mark.asyncio
    async def test_superseded_token_does_not_match(
        self, store: RedisSessionStore, mock_redis: AsyncMock
    ) -> None:
        """A newer login replaced the stored token."""
        mock_redis.get.return_value = "token-newer"

        assert await store.matches(uuid4(), "token-abc") is False

    @pytest.mark.asyncio
    async def test_missing_session_does_not_match(
        self, store: RedisSessionStore, mock_redis: AsyncMock
    ) -> None:
        mock_redis.get.return_value = None

        assert await store.matches(uuid4(), "token-abc") is False

    @pytest.mark.asyncio
    async def test_revoke(self, store: RedisSessionStore, mock_redis: AsyncMock) -> None:
        user_id = uuid4()

        await store.revoke(user_id)

        mock_redis.delete.assert_awaited_once_with(f"auth_token:{user_id}")
