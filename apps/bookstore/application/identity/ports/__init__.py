"""Identity Ports."""

from bookstore.application.identity.ports.session_store import SessionStore
from bookstore.application.identity.ports.token_issuer import TokenIssuer
from bookstore.application.identity.ports.user_reader import UserReader

__all__ = ["SessionStore", "TokenIssuer", "UserReader"]
