"""Catalog query builder.

Turns ``BookSearchCriteria`` into SQLAlchemy statements. The count statement
and the page statement share one predicate list so pagination metadata is
always computed over the filtered set.
"""

from __future__ import annotations

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.orm import selectinload

from bookstore.application.books.dto import BookSearchCriteria
from bookstore.domain.enums import BookSortField, SortOrder
from bookstore.infrastructure.persistence_postgres.models import BookModel

SORT_COLUMNS = {
    BookSortField.TITLE: BookModel.title,
    BookSortField.PRICE: BookModel.price,
    BookSortField.CREATED_AT: BookModel.created_at,
}


def build_book_filters(criteria: BookSearchCriteria) -> list[ColumnElement[bool]]:
    """Conjunctive predicates of a listing.

    Search is a case-insensitive substring match on the canonical title only;
    translated titles are not searched. Price bounds are applied as given,
    so ``min_price > max_price`` matches nothing.
    """
    conditions: list[ColumnElement[bool]] = []

    if criteria.search:
        conditions.append(BookModel.title.ilike(f"%{criteria.search}%"))
    if criteria.category_id is not None:
        conditions.append(BookModel.category_id == criteria.category_id)
    if criteria.min_price is not None:
        conditions.append(BookModel.price >= criteria.min_price)
    if criteria.max_price is not None:
        conditions.append(BookModel.price <= criteria.max_price)
    if criteria.author_id is not None:
        conditions.append(BookModel.author_id == criteria.author_id)

    return conditions


def build_book_ordering(criteria: BookSearchCriteria) -> list[ColumnElement]:
    column = SORT_COLUMNS[criteria.sort_by]
    primary = column.desc() if criteria.sort_order == SortOrder.DESC else column.asc()
    # id tie-breaker keeps pages stable when sort values repeat
    return [primary, BookModel.id.asc()]


def build_count_statement(criteria: BookSearchCriteria) -> Select:
    return select(func.count()).select_from(BookModel).where(*build_book_filters(criteria))


def build_page_statement(criteria: BookSearchCriteria) -> Select:
    return (
        with_book_relations(select(BookModel))
        .where(*build_book_filters(criteria))
        .order_by(*build_book_ordering(criteria))
        .limit(criteria.limit)
        .offset(criteria.offset)
    )


def with_book_relations(statement: Select) -> Select:
    """Eager-load author, category and tags."""
    return statement.options(
        selectinload(BookModel.author),
        selectinload(BookModel.category),
        selectinload(BookModel.tags),
    ).execution_options(populate_existing=True)
