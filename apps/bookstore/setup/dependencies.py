"""Dependency Injection for FastAPI.

Store handles (session factory, Redis client) live on ``app.state``; every
request gets its own ``AsyncSession`` and the readers/gateways built on it.
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from typing import Annotated, AsyncIterator

import redis.asyncio as aioredis
from fastapi import Depends, Header, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.application.books.commands import (
    CreateBookInteractor,
    DeleteBookInteractor,
    UpdateBookInteractor,
)
from bookstore.application.books.ports import BookReader
from bookstore.application.books.queries import GetBookQuery, ListBooksQuery, ListMyBooksQuery
from bookstore.application.books.services import BookReferenceChecker
from bookstore.application.categories.commands import (
    CreateCategoryInteractor,
    DeleteCategoryInteractor,
    UpdateCategoryInteractor,
)
from bookstore.application.categories.ports import CategoryReader
from bookstore.application.categories.queries import GetCategoryQuery, ListCategoriesQuery
from bookstore.application.i18n import resolve_locale
from bookstore.application.identity.ports import SessionStore, UserReader
from bookstore.application.tags.commands import CreateTagInteractor
from bookstore.application.tags.ports import TagReader
from bookstore.application.tags.queries import ListTagsQuery
from bookstore.application.users.commands import UpdateProfileInteractor
from bookstore.application.users.ports import ProfileReader
from bookstore.application.users.queries import GetProfileQuery, GetUserStatsQuery
from bookstore.domain.enums import Locale
from bookstore.infrastructure.persistence_postgres import (
    SqlaBookGateway,
    SqlaBookReader,
    SqlaCategoryGateway,
    SqlaCategoryReader,
    SqlaProfileGateway,
    SqlaTagGateway,
    SqlaTagReader,
    SqlaTransactionManager,
    SqlaUserReader,
)
from bookstore.infrastructure.persistence_redis import RedisSessionStore
from bookstore.infrastructure.security import JwtTokenService
from bookstore.setup.config import get_settings


# ============================================================
# Store handles
# ============================================================


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Open one session per request from the lifespan-owned factory."""
    async with request.app.state.session_factory() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def get_redis(request: Request) -> aioredis.Redis:
    return request.app.state.redis


@lru_cache
def get_token_service() -> JwtTokenService:
    settings = get_settings()
    return JwtTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        expires_in=timedelta(seconds=settings.session_ttl_seconds),
    )


# ============================================================
# Locale
# ============================================================


def get_request_locale(
    request: Request,
    lang: str | None = Query(None, description="Display language (en | ar)"),
    accept_language: str | None = Header(None),
) -> Locale:
    """Resolve the request locale and attach it to ``request.state``."""
    locale = resolve_locale(lang, accept_language)
    request.state.locale = locale
    return locale


LocaleDep = Annotated[Locale, Depends(get_request_locale)]


# ============================================================
# Readers / gateways
# ============================================================


def get_book_reader(session: SessionDep) -> BookReader:
    return SqlaBookReader(session)


def get_category_reader(session: SessionDep) -> CategoryReader:
    return SqlaCategoryReader(session)


def get_tag_reader(session: SessionDep) -> TagReader:
    return SqlaTagReader(session)


def get_user_reader(session: SessionDep) -> UserReader:
    return SqlaUserReader(session)


def get_profile_reader(session: SessionDep) -> ProfileReader:
    return SqlaUserReader(session)


def get_session_store(
    redis: Annotated[aioredis.Redis, Depends(get_redis)],
) -> SessionStore:
    return RedisSessionStore(redis)


def get_transaction_manager(session: SessionDep) -> SqlaTransactionManager:
    return SqlaTransactionManager(session)


def get_reference_checker(
    categories: Annotated[CategoryReader, Depends(get_category_reader)],
    tags: Annotated[TagReader, Depends(get_tag_reader)],
) -> BookReferenceChecker:
    return BookReferenceChecker(categories, tags)


# ============================================================
# Book use cases
# ============================================================


def get_list_books_query(
    reader: Annotated[BookReader, Depends(get_book_reader)],
) -> ListBooksQuery:
    return ListBooksQuery(reader)


def get_list_my_books_query(
    reader: Annotated[BookReader, Depends(get_book_reader)],
) -> ListMyBooksQuery:
    return ListMyBooksQuery(reader)


def get_book_query(
    reader: Annotated[BookReader, Depends(get_book_reader)],
) -> GetBookQuery:
    return GetBookQuery(reader)


def get_create_book_interactor(
    session: SessionDep,
    reader: Annotated[BookReader, Depends(get_book_reader)],
    references: Annotated[BookReferenceChecker, Depends(get_reference_checker)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
) -> CreateBookInteractor:
    return CreateBookInteractor(reader, SqlaBookGateway(session), references, tx)


def get_update_book_interactor(
    session: SessionDep,
    reader: Annotated[BookReader, Depends(get_book_reader)],
    references: Annotated[BookReferenceChecker, Depends(get_reference_checker)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
) -> UpdateBookInteractor:
    return UpdateBookInteractor(reader, SqlaBookGateway(session), references, tx)


def get_delete_book_interactor(
    session: SessionDep,
    reader: Annotated[BookReader, Depends(get_book_reader)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
) -> DeleteBookInteractor:
    return DeleteBookInteractor(reader, SqlaBookGateway(session), tx)


# ============================================================
# Category / tag use cases
# ============================================================


def get_list_categories_query(
    reader: Annotated[CategoryReader, Depends(get_category_reader)],
) -> ListCategoriesQuery:
    return ListCategoriesQuery(reader)


def get_category_query(
    reader: Annotated[CategoryReader, Depends(get_category_reader)],
) -> GetCategoryQuery:
    return GetCategoryQuery(reader)


def get_create_category_interactor(
    session: SessionDep,
    reader: Annotated[CategoryReader, Depends(get_category_reader)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
) -> CreateCategoryInteractor:
    return CreateCategoryInteractor(reader, SqlaCategoryGateway(session), tx)


def get_update_category_interactor(
    session: SessionDep,
    reader: Annotated[CategoryReader, Depends(get_category_reader)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
) -> UpdateCategoryInteractor:
    return UpdateCategoryInteractor(reader, SqlaCategoryGateway(session), tx)


def get_delete_category_interactor(
    session: SessionDep,
    reader: Annotated[CategoryReader, Depends(get_category_reader)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
) -> DeleteCategoryInteractor:
    return DeleteCategoryInteractor(reader, SqlaCategoryGateway(session), tx)


def get_list_tags_query(
    reader: Annotated[TagReader, Depends(get_tag_reader)],
) -> ListTagsQuery:
    return ListTagsQuery(reader)


def get_create_tag_interactor(
    session: SessionDep,
    reader: Annotated[TagReader, Depends(get_tag_reader)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
) -> CreateTagInteractor:
    return CreateTagInteractor(reader, SqlaTagGateway(session), tx)


# ============================================================
# User use cases
# ============================================================


def get_profile_query(
    reader: Annotated[ProfileReader, Depends(get_profile_reader)],
) -> GetProfileQuery:
    return GetProfileQuery(reader)


def get_user_stats_query(
    reader: Annotated[ProfileReader, Depends(get_profile_reader)],
) -> GetUserStatsQuery:
    return GetUserStatsQuery(reader)


def get_update_profile_interactor(
    session: SessionDep,
    reader: Annotated[ProfileReader, Depends(get_profile_reader)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
) -> UpdateProfileInteractor:
    return UpdateProfileInteractor(reader, SqlaProfileGateway(session), tx)
