"""Profile Command Gateway Port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from bookstore.application.users.dto import ProfileChanges


class ProfileCommandGateway(Protocol):
    async def update(self, user_id: UUID, changes: ProfileChanges) -> None:
        """Apply the non-None fields and refresh ``updated_at``."""
        ...
