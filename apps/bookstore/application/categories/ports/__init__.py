"""Category Ports."""

from bookstore.application.categories.ports.category_gateway import CategoryCommandGateway
from bookstore.application.categories.ports.category_reader import CategoryReader

__all__ = ["CategoryCommandGateway", "CategoryReader"]
