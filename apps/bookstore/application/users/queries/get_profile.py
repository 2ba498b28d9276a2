"""Get Profile Query."""

from __future__ import annotations

from uuid import UUID

from bookstore.application.users.ports import ProfileReader
from bookstore.domain.entities import UserProfile
from bookstore.domain.exceptions import UserNotFoundError


class GetProfileQuery:
    def __init__(self, reader: ProfileReader) -> None:
        self._reader = reader

    async def execute(self, user_id: UUID) -> UserProfile:
        """Raises UserNotFoundError for an unknown id."""
        profile = await self._reader.get_profile(user_id)
        if profile is None:
            raise UserNotFoundError(user_id)
        return profile
