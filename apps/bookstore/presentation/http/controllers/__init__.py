"""HTTP Controllers."""

from bookstore.presentation.http.controllers.auth import router as auth_router
from bookstore.presentation.http.controllers.books import router as books_router
from bookstore.presentation.http.controllers.categories import router as categories_router
from bookstore.presentation.http.controllers.health import router as health_router
from bookstore.presentation.http.controllers.tags import router as tags_router
from bookstore.presentation.http.controllers.users import router as users_router

__all__ = [
    "auth_router",
    "books_router",
    "categories_router",
    "health_router",
    "tags_router",
    "users_router",
]
