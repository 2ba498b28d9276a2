"""Get User Stats Query."""

from __future__ import annotations

from uuid import UUID

from bookstore.application.users.dto import UserStats
from bookstore.application.users.ports import ProfileReader
from bookstore.domain.exceptions import UserNotFoundError


class GetUserStatsQuery:
    """Profile plus the number of books the user has authored."""

    def __init__(self, reader: ProfileReader) -> None:
        self._reader = reader

    async def execute(self, user_id: UUID) -> UserStats:
        profile = await self._reader.get_profile(user_id)
        if profile is None:
            raise UserNotFoundError(user_id)
        return UserStats(
            user=profile,
            total_books=await self._reader.count_books(user_id),
            joined_date=profile.created_at,
            last_updated=profile.updated_at,
        )
