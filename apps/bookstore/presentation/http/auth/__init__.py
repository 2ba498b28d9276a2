"""HTTP authentication."""

from bookstore.presentation.http.auth.dependencies import (
    CurrentUser,
    get_bearer_token,
    get_current_user,
)

__all__ = ["CurrentUser", "get_bearer_token", "get_current_user"]
