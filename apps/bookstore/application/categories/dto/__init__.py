"""Category DTOs."""

from bookstore.application.categories.dto.category_input import CategoryInput, CategoryValues

__all__ = ["CategoryInput", "CategoryValues"]
