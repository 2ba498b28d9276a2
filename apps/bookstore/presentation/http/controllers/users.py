"""Users Controller.

Profile routes act on the bearer-token caller; stats are readable by any
authenticated user.
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from bookstore.application.users.commands import UpdateProfileInteractor
from bookstore.application.users.queries import GetProfileQuery, GetUserStatsQuery
from bookstore.presentation.http.auth import CurrentUser
from bookstore.presentation.http.schemas import (
    ApiResponse,
    UserProfileResponse,
    UserStatsResponse,
    UserUpdateRequest,
)
from bookstore.setup.dependencies import (
    get_profile_query,
    get_update_profile_interactor,
    get_user_stats_query,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/profile",
    response_model=ApiResponse[UserProfileResponse],
    response_model_exclude_none=True,
    summary="Get my profile",
)
async def get_profile(
    user: CurrentUser,
    query: Annotated[GetProfileQuery, Depends(get_profile_query)],
) -> ApiResponse[UserProfileResponse]:
    profile = await query.execute(user.id)
    return ApiResponse[UserProfileResponse](
        message="User profile retrieved successfully",
        data=UserProfileResponse.from_entity(profile),
    )


@router.put(
    "/profile",
    response_model=ApiResponse[UserProfileResponse],
    response_model_exclude_none=True,
    summary="Update my profile",
)
async def update_profile(
    user: CurrentUser,
    body: UserUpdateRequest,
    interactor: Annotated[UpdateProfileInteractor, Depends(get_update_profile_interactor)],
) -> ApiResponse[UserProfileResponse]:
    profile = await interactor.execute(user.id, body.to_changes())
    return ApiResponse[UserProfileResponse](
        message="Profile updated successfully",
        data=UserProfileResponse.from_entity(profile),
    )


@router.get(
    "/{user_id}/stats",
    response_model=ApiResponse[UserStatsResponse],
    response_model_exclude_none=True,
    summary="Get a user's statistics",
)
async def get_user_stats(
    user_id: UUID,
    user: CurrentUser,
    query: Annotated[GetUserStatsQuery, Depends(get_user_stats_query)],
) -> ApiResponse[UserStatsResponse]:
    stats = await query.execute(user_id)
    return ApiResponse[UserStatsResponse](
        message="User stats retrieved successfully",
        data=UserStatsResponse.from_stats(stats),
    )
