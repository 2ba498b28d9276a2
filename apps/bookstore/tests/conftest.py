"""Test fixtures for bookstore tests."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Sequence
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from bookstore.application.books.dto import BookPatch, BookSearchCriteria, NewBook
from bookstore.domain.entities import (
    AuthorSummary,
    AuthUser,
    Book,
    Category,
    CategorySummary,
    Tag,
    TagSummary,
    UserProfile,
)
from bookstore.domain.value_objects import LocalizedText


class InMemoryBookStore:
    """BookReader + BookCommandGateway over a dict, for use-case scenarios."""

    def __init__(self, category: CategorySummary, authors: dict[UUID, AuthorSummary]) -> None:
        self.books: dict[UUID, Book] = {}
        self._category = category
        self._authors = authors

    async def search(self, criteria: BookSearchCriteria) -> tuple[Sequence[Book], int]:
        books = list(self.books.values())
        if criteria.author_id is not None:
            books = [b for b in books if b.author_id == criteria.author_id]
        return books[criteria.offset : criteria.offset + criteria.limit], len(books)

    async def get_by_id(self, book_id: UUID) -> Book | None:
        return self.books.get(book_id)

    async def add(self, book: NewBook) -> UUID:
        book_id = uuid4()
        now = datetime.now(timezone.utc)
        self.books[book_id] = Book(
            id=book_id,
            title=book.title,
            description=book.description,
            title_translations=book.title_translations,
            description_translations=book.description_translations,
            price=book.price,
            thumbnail=book.thumbnail,
            author_id=book.author_id,
            category_id=book.category_id,
            created_at=now,
            updated_at=now,
            author=self._authors.get(book.author_id),
            category=self._category,
            tags=[TagSummary(id=tag_id, name=f"tag-{tag_id.hex[:4]}") for tag_id in book.tag_ids],
        )
        return book_id

    async def update(self, book_id: UUID, patch: BookPatch) -> None:
        book = self.books[book_id]
        changes = {
            name: getattr(patch, name)
            for name in (
                "title",
                "description",
                "title_translations",
                "description_translations",
                "price",
                "thumbnail",
                "category_id",
            )
            if getattr(patch, name) is not None
        }
        if patch.tag_ids is not None:
            changes["tags"] = [TagSummary(id=tag_id, name="t") for tag_id in patch.tag_ids]
        if patch.clear_thumbnail:
            changes["thumbnail"] = None
        self.books[book_id] = replace(book, updated_at=datetime.now(timezone.utc), **changes)

    async def delete(self, book_id: UUID) -> None:
        self.books.pop(book_id, None)


@pytest.fixture
def author() -> AuthUser:
    return AuthUser(
        id=uuid4(),
        username="layla",
        email="layla@example.com",
        first_name="Layla",
        last_name="Haddad",
    )


@pytest.fixture
def other_user() -> AuthUser:
    return AuthUser(id=uuid4(), username="omar", email="omar@example.com")


@pytest.fixture
def author_profile(author: AuthUser) -> UserProfile:
    return UserProfile(
        id=author.id,
        username=author.username,
        email=author.email,
        first_name=author.first_name,
        last_name=author.last_name,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_category() -> Category:
    """Category with both translations."""
    return Category(
        id=uuid4(),
        name="Programming",
        description="Books about software",
        name_translations=LocalizedText(en="Programming", ar="برمجة"),
        description_translations=LocalizedText(en="Books about software", ar="كتب عن البرمجيات"),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_tag() -> Tag:
    return Tag(
        id=uuid4(),
        name="bestseller",
        name_translations=LocalizedText(en="Bestseller", ar="الأكثر مبيعا"),
    )


@pytest.fixture
def sample_book(author: AuthUser, sample_category: Category, sample_tag: Tag) -> Book:
    """Book with a full title translation and an Arabic-less description."""
    return Book(
        id=uuid4(),
        title="Clean Code",
        description="A handbook of agile software craftsmanship",
        title_translations=LocalizedText(en="Clean Code", ar="الكود النظيف"),
        description_translations=LocalizedText(
            en="A handbook of agile software craftsmanship", ar=""
        ),
        price=Decimal("29.9"),
        thumbnail="https://example.com/clean-code.jpg",
        author_id=author.id,
        category_id=sample_category.id,
        created_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
        author=AuthorSummary(
            id=author.id,
            username=author.username,
            first_name=author.first_name,
            last_name=author.last_name,
        ),
        category=CategorySummary(
            id=sample_category.id,
            name=sample_category.name,
            description=sample_category.description,
            name_translations=sample_category.name_translations,
            description_translations=sample_category.description_translations,
        ),
        tags=[
            TagSummary(
                id=sample_tag.id,
                name=sample_tag.name,
                name_translations=sample_tag.name_translations,
            )
        ],
    )


@pytest.fixture
def legacy_book(author: AuthUser, sample_category: Category) -> Book:
    """Book created before translations existed."""
    return Book(
        id=uuid4(),
        title="The Pragmatic Programmer",
        description=None,
        price=Decimal("45.00"),
        author_id=author.id,
        category_id=sample_category.id,
    )


@pytest.fixture
def mock_book_reader() -> AsyncMock:
    reader = AsyncMock()
    reader.search = AsyncMock(return_value=([], 0))
    reader.get_by_id = AsyncMock(return_value=None)
    return reader


@pytest.fixture
def mock_book_command() -> AsyncMock:
    gateway = AsyncMock()
    gateway.add = AsyncMock(return_value=uuid4())
    return gateway


@pytest.fixture
def mock_category_reader(sample_category: Category) -> AsyncMock:
    reader = AsyncMock()
    reader.list_all = AsyncMock(return_value=[sample_category])
    reader.get_by_id = AsyncMock(return_value=sample_category)
    reader.get_by_name = AsyncMock(return_value=None)
    reader.count_books = AsyncMock(return_value=0)
    return reader


@pytest.fixture
def mock_category_command() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_tag_reader(sample_tag: Tag) -> AsyncMock:
    reader = AsyncMock()
    reader.list_all = AsyncMock(return_value=[sample_tag])
    reader.get_by_name = AsyncMock(return_value=None)
    reader.find_missing = AsyncMock(return_value=[])
    return reader


@pytest.fixture
def mock_tag_command() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_tx() -> AsyncMock:
    """TransactionManager mock."""
    tx = AsyncMock()
    tx.commit = AsyncMock()
    tx.rollback = AsyncMock()
    return tx


@pytest.fixture
def book_store(sample_book: Book, author: AuthUser, other_user: AuthUser) -> InMemoryBookStore:
    authors = {
        user.id: AuthorSummary(id=user.id, username=user.username)
        for user in (author, other_user)
    }
    assert sample_book.category is not None
    return InMemoryBookStore(sample_book.category, authors)


@pytest.fixture
def mock_profile_reader(author_profile: UserProfile) -> AsyncMock:
    reader = AsyncMock()
    reader.get_profile = AsyncMock(return_value=author_profile)
    reader.get_by_email = AsyncMock(return_value=None)
    reader.count_books = AsyncMock(return_value=0)
    return reader


@pytest.fixture
def mock_profile_command() -> AsyncMock:
    return AsyncMock()
