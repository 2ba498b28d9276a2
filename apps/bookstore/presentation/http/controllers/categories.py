"""Categories Controller.

Mutations carry no ownership or admin check; any caller may create, edit or
delete a category.
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from bookstore.application.categories.commands import (
    CreateCategoryInteractor,
    DeleteCategoryInteractor,
    UpdateCategoryInteractor,
)
from bookstore.application.categories.queries import GetCategoryQuery, ListCategoriesQuery
from bookstore.application.i18n import localize_category
from bookstore.domain.entities import Category
from bookstore.domain.enums import Locale
from bookstore.presentation.http.schemas import (
    ApiResponse,
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from bookstore.setup.dependencies import (
    LocaleDep,
    get_category_query,
    get_create_category_interactor,
    get_delete_category_interactor,
    get_list_categories_query,
    get_update_category_interactor,
)

router = APIRouter(prefix="/categories", tags=["categories"])


def _category_response(
    message: str, category: Category, locale: Locale
) -> ApiResponse[CategoryResponse]:
    return ApiResponse[CategoryResponse](
        message=message,
        data=CategoryResponse.from_entity(category),
        locale=locale.value,
    )


@router.get(
    "", response_model=ApiResponse[list[CategoryResponse]], response_model_exclude_none=True
)
async def list_categories(
    query: Annotated[ListCategoriesQuery, Depends(get_list_categories_query)],
    locale: LocaleDep,
    search: str | None = Query(None, max_length=255),
) -> ApiResponse[list[CategoryResponse]]:
    categories = await query.execute(locale, search)
    return ApiResponse[list[CategoryResponse]](
        message="Categories retrieved successfully",
        data=[CategoryResponse.from_entity(category) for category in categories],
        locale=locale.value,
    )


@router.get(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    response_model_exclude_none=True,
)
async def get_category(
    category_id: UUID,
    query: Annotated[GetCategoryQuery, Depends(get_category_query)],
    locale: LocaleDep,
) -> ApiResponse[CategoryResponse]:
    category = await query.execute(category_id, locale)
    return _category_response("Category retrieved successfully", category, locale)


@router.post(
    "",
    response_model=ApiResponse[CategoryResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreateRequest,
    interactor: Annotated[CreateCategoryInteractor, Depends(get_create_category_interactor)],
    locale: LocaleDep,
) -> ApiResponse[CategoryResponse]:
    category = await interactor.execute(body.to_input())
    return _category_response(
        "Category created successfully", localize_category(category, locale), locale
    )


@router.put(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    response_model_exclude_none=True,
)
async def update_category(
    category_id: UUID,
    body: CategoryUpdateRequest,
    interactor: Annotated[UpdateCategoryInteractor, Depends(get_update_category_interactor)],
    locale: LocaleDep,
) -> ApiResponse[CategoryResponse]:
    category = await interactor.execute(category_id, body.to_input())
    return _category_response(
        "Category updated successfully", localize_category(category, locale), locale
    )


@router.delete("/{category_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_category(
    category_id: UUID,
    interactor: Annotated[DeleteCategoryInteractor, Depends(get_delete_category_interactor)],
) -> ApiResponse:
    await interactor.execute(category_id)
    return ApiResponse(message="Category deleted successfully")
