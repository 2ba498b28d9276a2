"""Token Issuer Port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID


class TokenIssuer(Protocol):
    def issue(self, *, user_id: UUID, username: str, email: str) -> str:
        ...
