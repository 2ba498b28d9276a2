"""SQLAlchemy User Reader."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.application.users.ports import ProfileReader
from bookstore.domain.entities import AuthUser, UserProfile
from bookstore.infrastructure.persistence_postgres.mappers import user_to_profile
from bookstore.infrastructure.persistence_postgres.models import BookModel, UserModel


class SqlaUserReader(ProfileReader):
    """Serves both the bearer-token lookup and the profile use cases."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: UUID) -> AuthUser | None:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return None
        return AuthUser(
            id=model.id,
            username=model.username,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
        )

    async def get_profile(self, user_id: UUID) -> UserProfile | None:
        model = await self._session.get(UserModel, user_id, populate_existing=True)
        return user_to_profile(model) if model is not None else None

    async def get_by_email(self, email: str) -> UserProfile | None:
        result = await self._session.execute(select(UserModel).where(UserModel.email == email))
        model = result.scalar_one_or_none()
        return user_to_profile(model) if model is not None else None

    async def count_books(self, user_id: UUID) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(BookModel).where(BookModel.author_id == user_id)
        )
        return int(result.scalar_one())
