"""Profile Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from bookstore.domain.entities import UserProfile


class ProfileReader(ABC):
    @abstractmethod
    async def get_profile(self, user_id: UUID) -> UserProfile | None: ...

    @abstractmethod
    async def get_by_email(self, email: str) -> UserProfile | None:
        """Exact, case-sensitive match."""

    @abstractmethod
    async def count_books(self, user_id: UUID) -> int:
        """Number of books authored by the user."""
