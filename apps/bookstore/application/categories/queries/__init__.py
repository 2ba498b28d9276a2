"""Category Queries."""

from bookstore.application.categories.queries.list_categories import (
    GetCategoryQuery,
    ListCategoriesQuery,
)

__all__ = ["GetCategoryQuery", "ListCategoriesQuery"]
