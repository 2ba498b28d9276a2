"""Auth Controller - session revocation."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from bookstore.application.identity.ports import SessionStore
from bookstore.presentation.http.auth import CurrentUser
from bookstore.presentation.http.schemas import ApiResponse
from bookstore.setup.dependencies import get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/logout", response_model=ApiResponse, response_model_exclude_none=True)
async def logout(
    user: CurrentUser,
    session_store: Annotated[SessionStore, Depends(get_session_store)],
) -> ApiResponse:
    """Revoke the caller's session; the same token is rejected afterwards."""
    await session_store.revoke(user.id)
    logger.info("Session revoked", extra={"user_id": str(user.id)})
    return ApiResponse(message="Logged out successfully")
