"""HTTP Schemas."""

from bookstore.presentation.http.schemas.book import (
    BookCreateRequest,
    BookResponse,
    BookUpdateRequest,
)
from bookstore.presentation.http.schemas.category import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
    TagCreateRequest,
    TagResponse,
)
from bookstore.presentation.http.schemas.common import (
    ApiResponse,
    LocalizedTextSchema,
    PaginationSchema,
)
from bookstore.presentation.http.schemas.user import (
    UserProfileResponse,
    UserStatsResponse,
    UserUpdateRequest,
)

__all__ = [
    "ApiResponse",
    "BookCreateRequest",
    "BookResponse",
    "BookUpdateRequest",
    "CategoryCreateRequest",
    "CategoryResponse",
    "CategoryUpdateRequest",
    "LocalizedTextSchema",
    "PaginationSchema",
    "TagCreateRequest",
    "TagResponse",
    "UserProfileResponse",
    "UserStatsResponse",
    "UserUpdateRequest",
]
