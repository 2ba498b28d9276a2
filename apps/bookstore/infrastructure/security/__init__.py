"""Security Infrastructure."""

from bookstore.infrastructure.security.jwt_token_service import JwtTokenService, TokenPayload

__all__ = ["JwtTokenService", "TokenPayload"]
