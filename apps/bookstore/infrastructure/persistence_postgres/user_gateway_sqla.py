"""SQLAlchemy Profile Command Gateway."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.application.users.dto import ProfileChanges
from bookstore.domain.exceptions import EmailConflictError, UserNotFoundError
from bookstore.infrastructure.persistence_postgres.models import UserModel


class SqlaProfileGateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def update(self, user_id: UUID, changes: ProfileChanges) -> None:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            raise UserNotFoundError(user_id)

        if changes.first_name is not None:
            model.first_name = changes.first_name or None
        if changes.last_name is not None:
            model.last_name = changes.last_name or None
        if changes.email is not None:
            model.email = changes.email
        model.updated_at = datetime.now(timezone.utc)

        try:
            await self._session.flush()
        except IntegrityError as e:
            # unique(email) taken after the pre-check
            raise EmailConflictError(changes.email or "") from e
