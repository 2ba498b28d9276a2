"""Tags Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookstore.application.i18n import localize_tag
from bookstore.application.tags.commands import CreateTagInteractor
from bookstore.application.tags.queries import ListTagsQuery
from bookstore.presentation.http.schemas import ApiResponse, TagCreateRequest, TagResponse
from bookstore.setup.dependencies import LocaleDep, get_create_tag_interactor, get_list_tags_query

router = APIRouter(prefix="/books/tags", tags=["tags"])


@router.get("", response_model=ApiResponse[list[TagResponse]], response_model_exclude_none=True)
async def list_tags(
    query: Annotated[ListTagsQuery, Depends(get_list_tags_query)],
    locale: LocaleDep,
) -> ApiResponse[list[TagResponse]]:
    tags = await query.execute(locale)
    return ApiResponse[list[TagResponse]](
        message="Tags retrieved successfully",
        data=[TagResponse.from_entity(tag) for tag in tags],
        locale=locale.value,
    )


@router.post(
    "",
    response_model=ApiResponse[TagResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_tag(
    body: TagCreateRequest,
    interactor: Annotated[CreateTagInteractor, Depends(get_create_tag_interactor)],
    locale: LocaleDep,
) -> ApiResponse[TagResponse]:
    tag = await interactor.execute(body.to_input())
    return ApiResponse[TagResponse](
        message="Tag created successfully",
        data=TagResponse.from_entity(localize_tag(tag, locale)),
        locale=locale.value,
    )
