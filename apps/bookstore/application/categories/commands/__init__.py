"""Category Commands."""

from bookstore.application.categories.commands.create_category import CreateCategoryInteractor
from bookstore.application.categories.commands.delete_category import DeleteCategoryInteractor
from bookstore.application.categories.commands.update_category import UpdateCategoryInteractor

__all__ = ["CreateCategoryInteractor", "DeleteCategoryInteractor", "UpdateCategoryInteractor"]
