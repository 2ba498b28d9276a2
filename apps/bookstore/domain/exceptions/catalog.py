"""Catalog domain exceptions."""

from __future__ import annotations

from uuid import UUID

from bookstore.domain.exceptions.base import ConflictError, ForbiddenError, NotFoundError


class BookNotFoundError(NotFoundError):
    def __init__(self, book_id: UUID | None = None) -> None:
        self.book_id = book_id
        super().__init__("Book not found")


class BookOwnershipError(ForbiddenError):
    def __init__(self, action: str = "edit") -> None:
        super().__init__(f"You can only {action} your own books")


class CategoryNotFoundError(NotFoundError):
    def __init__(self, category_id: UUID | None = None) -> None:
        self.category_id = category_id
        super().__init__("Category not found")


class CategoryNameConflictError(ConflictError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Category name already exists")


class CategoryInUseError(ConflictError):
    """Category still referenced by at least one book."""

    def __init__(self, category_id: UUID, book_count: int) -> None:
        self.category_id = category_id
        self.book_count = book_count
        super().__init__("Cannot delete category that has books")


class TagNotFoundError(NotFoundError):
    def __init__(self, tag_id: UUID | None = None) -> None:
        self.tag_id = tag_id
        super().__init__("Tag not found")


class TagNameConflictError(ConflictError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Tag name already exists")
