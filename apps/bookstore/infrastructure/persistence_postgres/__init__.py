"""PostgreSQL Infrastructure."""

from bookstore.infrastructure.persistence_postgres.book_gateway_sqla import SqlaBookGateway
from bookstore.infrastructure.persistence_postgres.book_reader_sqla import SqlaBookReader
from bookstore.infrastructure.persistence_postgres.category_sqla import (
    SqlaCategoryGateway,
    SqlaCategoryReader,
)
from bookstore.infrastructure.persistence_postgres.models import Base
from bookstore.infrastructure.persistence_postgres.tag_sqla import SqlaTagGateway, SqlaTagReader
from bookstore.infrastructure.persistence_postgres.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from bookstore.infrastructure.persistence_postgres.user_gateway_sqla import SqlaProfileGateway
from bookstore.infrastructure.persistence_postgres.user_reader_sqla import SqlaUserReader

__all__ = [
    "Base",
    "SqlaBookGateway",
    "SqlaBookReader",
    "SqlaCategoryGateway",
    "SqlaCategoryReader",
    "SqlaProfileGateway",
    "SqlaTagGateway",
    "SqlaTagReader",
    "SqlaTransactionManager",
    "SqlaUserReader",
]
