"""Books Controller."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from bookstore.application.books.commands import (
    CreateBookInteractor,
    DeleteBookInteractor,
    UpdateBookInteractor,
)
from bookstore.application.books.dto import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    BookSearchCriteria,
)
from bookstore.application.books.queries import GetBookQuery, ListBooksQuery, ListMyBooksQuery
from bookstore.application.common.dto import Page
from bookstore.application.i18n import localize_book
from bookstore.domain.entities import Book
from bookstore.domain.enums import BookSortField, Locale, SortOrder
from bookstore.presentation.http.auth import CurrentUser
from bookstore.presentation.http.schemas import (
    ApiResponse,
    BookCreateRequest,
    BookResponse,
    BookUpdateRequest,
    PaginationSchema,
)
from bookstore.setup.dependencies import (
    LocaleDep,
    get_book_query,
    get_create_book_interactor,
    get_delete_book_interactor,
    get_list_books_query,
    get_list_my_books_query,
    get_update_book_interactor,
)

router = APIRouter(prefix="/books", tags=["books"])


def book_search_criteria(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    search: str | None = Query(None, max_length=255),
    category_id: UUID | None = Query(None, alias="categoryId"),
    min_price: Decimal | None = Query(None, ge=0, alias="minPrice"),
    max_price: Decimal | None = Query(None, ge=0, alias="maxPrice"),
    sort_by: BookSortField = Query(BookSortField.TITLE, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.ASC, alias="sortOrder"),
) -> BookSearchCriteria:
    """Listing query parameters; out-of-range values are rejected with 400."""
    return BookSearchCriteria(
        page=page,
        limit=limit,
        search=search or None,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        sort_order=sort_order,
    )


CriteriaDep = Annotated[BookSearchCriteria, Depends(book_search_criteria)]


def _page_response(
    message: str, page: Page[Book], locale: Locale
) -> ApiResponse[list[BookResponse]]:
    return ApiResponse[list[BookResponse]](
        message=message,
        data=[BookResponse.from_entity(book) for book in page.items],
        pagination=PaginationSchema.from_meta(page.pagination),
        locale=locale.value,
    )


def _book_response(message: str, book: Book, locale: Locale) -> ApiResponse[BookResponse]:
    return ApiResponse[BookResponse](
        message=message,
        data=BookResponse.from_entity(book),
        locale=locale.value,
    )


@router.get(
    "",
    response_model=ApiResponse[list[BookResponse]],
    response_model_exclude_none=True,
    summary="List books",
)
@router.get(
    "/localized",
    response_model=ApiResponse[list[BookResponse]],
    response_model_exclude_none=True,
    summary="List books (localized)",
)
async def list_books(
    query: Annotated[ListBooksQuery, Depends(get_list_books_query)],
    criteria: CriteriaDep,
    locale: LocaleDep,
) -> ApiResponse[list[BookResponse]]:
    """Filtered, sorted, paginated catalog in the requested language."""
    page = await query.execute(criteria, locale)
    return _page_response("Books retrieved successfully", page, locale)


@router.get(
    "/my",
    response_model=ApiResponse[list[BookResponse]],
    response_model_exclude_none=True,
    summary="List my books",
)
async def list_my_books(
    user: CurrentUser,
    query: Annotated[ListMyBooksQuery, Depends(get_list_my_books_query)],
    criteria: CriteriaDep,
    locale: LocaleDep,
) -> ApiResponse[list[BookResponse]]:
    page = await query.execute(user.id, criteria, locale)
    return _page_response("My books retrieved successfully", page, locale)


@router.post(
    "/my",
    response_model=ApiResponse[BookResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a book",
)
@router.post(
    "/multilingual",
    response_model=ApiResponse[BookResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a book with translations",
)
async def create_book(
    user: CurrentUser,
    body: BookCreateRequest,
    interactor: Annotated[CreateBookInteractor, Depends(get_create_book_interactor)],
    locale: LocaleDep,
) -> ApiResponse[BookResponse]:
    book = await interactor.execute(user.id, body.to_draft())
    return _book_response("Book created successfully", localize_book(book, locale), locale)


@router.put(
    "/my/{book_id}",
    response_model=ApiResponse[BookResponse],
    response_model_exclude_none=True,
    summary="Update one of my books",
)
@router.put(
    "/multilingual/{book_id}",
    response_model=ApiResponse[BookResponse],
    response_model_exclude_none=True,
    summary="Update one of my books with translations",
)
async def update_book(
    book_id: UUID,
    user: CurrentUser,
    body: BookUpdateRequest,
    interactor: Annotated[UpdateBookInteractor, Depends(get_update_book_interactor)],
    locale: LocaleDep,
) -> ApiResponse[BookResponse]:
    book = await interactor.execute(user.id, book_id, body.to_changes())
    return _book_response("Book updated successfully", localize_book(book, locale), locale)


@router.delete(
    "/my/{book_id}",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="Delete one of my books",
)
async def delete_book(
    book_id: UUID,
    user: CurrentUser,
    interactor: Annotated[DeleteBookInteractor, Depends(get_delete_book_interactor)],
) -> ApiResponse:
    await interactor.execute(user.id, book_id)
    return ApiResponse(message="Book deleted successfully")


@router.get(
    "/localized/{book_id}",
    response_model=ApiResponse[BookResponse],
    response_model_exclude_none=True,
    summary="Get a book (localized)",
)
@router.get(
    "/{book_id}",
    response_model=ApiResponse[BookResponse],
    response_model_exclude_none=True,
    summary="Get a book",
)
async def get_book(
    book_id: UUID,
    query: Annotated[GetBookQuery, Depends(get_book_query)],
    locale: LocaleDep,
) -> ApiResponse[BookResponse]:
    book = await query.execute(book_id, locale)
    return _book_response("Book retrieved successfully", book, locale)
