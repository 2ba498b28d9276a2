"""Catalog query builder and pagination metadata tests."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql

from bookstore.application.books.dto import BookSearchCriteria
from bookstore.application.common.dto import PaginationMeta
from bookstore.domain.enums import BookSortField, SortOrder
from bookstore.infrastructure.persistence_postgres.book_query_builder import (
    build_book_filters,
    build_count_statement,
    build_page_statement,
)


def _compile(statement):
    return statement.compile(dialect=postgresql.dialect())


class TestBuildBookFilters:
    """build_book_filters tests."""

    def test_no_criteria_no_filters(self) -> None:
        assert build_book_filters(BookSearchCriteria()) == []

    def test_empty_search_is_ignored(self) -> None:
        assert build_book_filters(BookSearchCriteria(search="")) == []

    def test_search_targets_canonical_title_only(self) -> None:
        """Case-insensitive substring on books.title; translations untouched."""
        compiled = _compile(build_count_statement(BookSearchCriteria(search="Clean")))
        sql = str(compiled)

        assert "books.title ILIKE" in sql
        assert "title_translations" not in sql
        assert "%Clean%" in compiled.params.values()

    def test_filters_are_conjunctive(self) -> None:
        category_id = uuid4()
        criteria = BookSearchCriteria(
            search="code",
            category_id=category_id,
            min_price=Decimal("10"),
            max_price=Decimal("50"),
        )

        filters = build_book_filters(criteria)
        sql = str(_compile(build_count_statement(criteria)))

        assert len(filters) == 4
        assert sql.count(" AND ") == 3
        assert "books.category_id = " in sql
        assert "books.price >= " in sql
        assert "books.price <= " in sql

    def test_inverted_price_range_is_not_swapped(self) -> None:
        """min > max keeps both bounds as given, so nothing can match."""
        criteria = BookSearchCriteria(min_price=Decimal("50"), max_price=Decimal("10"))
        compiled = _compile(build_count_statement(criteria))
        sql = str(compiled)

        ge_param = sql.split("books.price >= %(")[1].split(")s")[0]
        le_param = sql.split("books.price <= %(")[1].split(")s")[0]
        assert compiled.params[ge_param] == Decimal("50")
        assert compiled.params[le_param] == Decimal("10")

    def test_author_filter_only_when_set(self) -> None:
        author_id = uuid4()
        plain = str(_compile(build_count_statement(BookSearchCriteria())))
        mine = _compile(build_count_statement(BookSearchCriteria().for_author(author_id)))

        assert "author_id" not in plain
        assert "books.author_id = " in str(mine)
        assert author_id in mine.params.values()


class TestStatements:
    """Count and page statements."""

    def test_count_uses_same_predicates_as_page(self) -> None:
        criteria = BookSearchCriteria(search="clean", min_price=Decimal("1"), page=3, limit=5)
        count_sql = str(_compile(build_count_statement(criteria)))
        page_sql = str(_compile(build_page_statement(criteria)))

        count_where = count_sql.split("WHERE", 1)[1].strip()
        page_where = page_sql.split("WHERE", 1)[1].split("ORDER BY")[0].strip()
        assert count_where == page_where
        assert "count(*)" in count_sql
        assert "LIMIT" not in count_sql

    def test_page_limit_and_offset(self) -> None:
        compiled = _compile(build_page_statement(BookSearchCriteria(page=3, limit=20)))
        sql = str(compiled)

        assert "LIMIT" in sql and "OFFSET" in sql
        assert 20 in compiled.params.values()
        assert 40 in compiled.params.values()

    def test_default_sort_is_title_ascending(self) -> None:
        sql = str(_compile(build_page_statement(BookSearchCriteria())))
        assert "ORDER BY books.title ASC, books.id ASC" in sql

    @pytest.mark.parametrize(
        ("sort_by", "sort_order", "expected"),
        [
            (BookSortField.PRICE, SortOrder.DESC, "ORDER BY books.price DESC"),
            (BookSortField.CREATED_AT, SortOrder.ASC, "ORDER BY books.created_at ASC"),
            (BookSortField.TITLE, SortOrder.DESC, "ORDER BY books.title DESC"),
        ],
    )
    def test_sort_options(
        self, sort_by: BookSortField, sort_order: SortOrder, expected: str
    ) -> None:
        criteria = BookSearchCriteria(sort_by=sort_by, sort_order=sort_order)
        assert expected in str(_compile(build_page_statement(criteria)))


class TestPaginationMeta:
    """PaginationMeta.build tests."""

    @pytest.mark.parametrize("limit", [1, 3, 10, 100])
    @pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 250])
    @pytest.mark.parametrize("page", [1, 2, 5])
    def test_has_next_iff_more_rows_after_page(self, page: int, limit: int, total: int) -> None:
        meta = PaginationMeta.build(page, limit, total)
        assert meta.has_next is (page * limit < total)
        assert meta.has_prev is (page > 1)

    def test_total_pages(self) -> None:
        assert PaginationMeta.build(1, 10, 0).total_pages == 0
        assert PaginationMeta.build(1, 10, 10).total_pages == 1
        assert PaginationMeta.build(1, 10, 11).total_pages == 2

    def test_last_page(self) -> None:
        meta = PaginationMeta.build(3, 10, 25)
        assert meta.has_next is False
        assert meta.has_prev is True
