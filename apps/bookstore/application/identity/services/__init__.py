"""Identity Services."""

from bookstore.application.identity.services.session_issuer import SessionIssuer

__all__ = ["SessionIssuer"]
