"""Session Issuer.

Mints a bearer token and records it as the user's current session, so the
token passes the session check in ``get_current_user``. Issuing replaces any
earlier session of the same user.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bookstore.domain.entities import AuthUser

if TYPE_CHECKING:
    from bookstore.application.identity.ports import SessionStore, TokenIssuer

logger = logging.getLogger(__name__)


class SessionIssuer:
    def __init__(
        self,
        token_issuer: "TokenIssuer",
        session_store: "SessionStore",
        ttl_seconds: int,
    ) -> None:
        self._token_issuer = token_issuer
        self._session_store = session_store
        self._ttl_seconds = ttl_seconds

    async def issue(self, user: AuthUser) -> str:
        token = self._token_issuer.issue(
            user_id=user.id, username=user.username, email=user.email
        )
        await self._session_store.save(user.id, token, self._ttl_seconds)
        logger.info(
            "Session issued",
            extra={"user_id": str(user.id), "ttl_seconds": self._ttl_seconds},
        )
        return token
