"""Update Profile command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from bookstore.application.users.dto import ProfileChanges
from bookstore.domain.entities import UserProfile
from bookstore.domain.exceptions import EmailConflictError, UserNotFoundError

if TYPE_CHECKING:
    from bookstore.application.common.ports import TransactionManager
    from bookstore.application.users.ports import ProfileCommandGateway, ProfileReader

logger = logging.getLogger(__name__)


class UpdateProfileInteractor:
    """Updates the caller's names and email."""

    def __init__(
        self,
        profile_reader: "ProfileReader",
        profile_command: "ProfileCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._profile_reader = profile_reader
        self._profile_command = profile_command
        self._tx = transaction_manager

    async def execute(self, user_id: UUID, changes: ProfileChanges) -> UserProfile:
        """Update a profile.

        Raises:
            UserNotFoundError: no user has this id.
            EmailConflictError: the new email belongs to another user.
        """
        logger.info(
            "Profile update requested",
            extra={
                "user_id": str(user_id),
                "has_first_name": changes.first_name is not None,
                "has_last_name": changes.last_name is not None,
                "has_email": changes.email is not None,
            },
        )

        profile = await self._profile_reader.get_profile(user_id)
        if profile is None:
            raise UserNotFoundError(user_id)

        if changes.email is not None and changes.email != profile.email:
            owner = await self._profile_reader.get_by_email(changes.email)
            if owner is not None and owner.id != user_id:
                raise EmailConflictError(changes.email)

        try:
            await self._profile_command.update(user_id, changes)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        updated = await self._profile_reader.get_profile(user_id)
        if updated is None:
            raise UserNotFoundError(user_id)
        return updated
