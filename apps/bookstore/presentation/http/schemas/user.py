"""User profile schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, field_validator

from bookstore.application.users.dto import ProfileChanges, UserStats
from bookstore.domain.entities import UserProfile
from bookstore.presentation.http.schemas.common import CamelModel

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50


class UserProfileResponse(CamelModel):
    id: UUID
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, profile: UserProfile) -> UserProfileResponse:
        return cls(
            id=profile.id,
            username=profile.username,
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class UserStatsSchema(CamelModel):
    total_books: int
    joined_date: Optional[datetime] = None
    last_updated: Optional[datetime] = None


class UserStatsResponse(CamelModel):
    user: UserProfileResponse
    stats: UserStatsSchema

    @classmethod
    def from_stats(cls, stats: UserStats) -> UserStatsResponse:
        return cls(
            user=UserProfileResponse.from_entity(stats.user),
            stats=UserStatsSchema(
                total_books=stats.total_books,
                joined_date=stats.joined_date,
                last_updated=stats.last_updated,
            ),
        )


class UserUpdateRequest(CamelModel):
    """Partial profile update; an empty name clears it."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def _check_name_length(cls, value: Optional[str]) -> Optional[str]:
        if value and not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
            raise ValueError(
                f"must be empty or {NAME_MIN_LENGTH} to {NAME_MAX_LENGTH} characters"
            )
        return value

    def to_changes(self) -> ProfileChanges:
        return ProfileChanges(
            first_name=self.first_name,
            last_name=self.last_name,
            email=str(self.email) if self.email is not None else None,
        )
