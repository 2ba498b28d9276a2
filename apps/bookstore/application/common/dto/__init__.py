"""Common DTOs."""

from bookstore.application.common.dto.pagination import Page, PaginationMeta

__all__ = ["Page", "PaginationMeta"]
