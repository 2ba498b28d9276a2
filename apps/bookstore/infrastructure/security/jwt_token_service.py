"""JWT Token Service.

Verifies the bearer tokens issued by the identity service. ``issue`` mirrors
the issuer's payload format and is used to mint tokens for local tooling.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from bookstore.domain.exceptions import InvalidTokenError, TokenExpiredError


@dataclass(frozen=True)
class TokenPayload:
    user_id: UUID
    username: str
    email: str
    exp: int
    iat: int


class JwtTokenService:
    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "books-shop-api",
        expires_in: timedelta = timedelta(days=7),
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._expires_in = expires_in

    def issue(self, *, user_id: UUID, username: str, email: str) -> str:
        now = int(time.time())
        payload: dict[str, Any] = {
            "userId": str(user_id),
            "username": username,
            "email": email,
            "iat": now,
            "exp": now + int(self._expires_in.total_seconds()),
            "iss": self._issuer,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenPayload:
        """Verify signature, expiry and issuer.

        Raises:
            TokenExpiredError: ``exp`` has passed.
            InvalidTokenError: bad signature, issuer or payload.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
            )
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        try:
            return TokenPayload(
                user_id=UUID(payload["userId"]),
                username=payload["username"],
                email=payload["email"],
                exp=int(payload["exp"]),
                iat=int(payload.get("iat", 0)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("Malformed token payload") from e
