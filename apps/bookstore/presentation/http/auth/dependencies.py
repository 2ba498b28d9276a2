"""Auth Dependencies.

Resolves the caller from ``Authorization: Bearer <token>``:
JWT verification, then the Redis session check, then the user lookup.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bookstore.application.identity.ports import SessionStore, UserReader
from bookstore.domain.entities import AuthUser
from bookstore.domain.exceptions import InvalidTokenError, TokenExpiredError
from bookstore.infrastructure.security import JwtTokenService
from bookstore.setup.dependencies import get_session_store, get_token_service, get_user_reader

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str:
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Authorization token required")
    return credentials.credentials


async def get_current_user(
    token: Annotated[str, Depends(get_bearer_token)],
    token_service: Annotated[JwtTokenService, Depends(get_token_service)],
    session_store: Annotated[SessionStore, Depends(get_session_store)],
    user_reader: Annotated[UserReader, Depends(get_user_reader)],
) -> AuthUser:
    """Return the authenticated caller.

    Raises:
        HTTPException: 401 on any verification failure.
    """
    try:
        payload = token_service.decode(token)
    except TokenExpiredError as e:
        raise _unauthorized(e.message) from e
    except InvalidTokenError as e:
        logger.info("Rejected bearer token", extra={"reason": e.message})
        raise _unauthorized("Invalid or expired token") from e

    if not await session_store.matches(payload.user_id, token):
        raise _unauthorized("Invalid or expired token")

    user = await user_reader.get_by_id(payload.user_id)
    if user is None:
        raise _unauthorized("User not found")
    return user


CurrentUser = Annotated[AuthUser, Depends(get_current_user)]
