"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from juicebox.application.usecase.post import ListPostsResponse
from juicebox.application.usecase.tag import (
    ListPostsByTagRequest,
    ListPostsByTagUseCase,
    ListTagsResponse,
    ListTagsUseCase,
)
from juicebox.domain.service import JWTService
from juicebox.interface.api.auth import bearer_token

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all tags",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all tags, ordered by id."""
    return await use_case.execute()


@router.get(
    "/{tag_name}/posts",
    response_model=ListPostsResponse,
    summary="List posts labeled with a tag",
)
async def list_posts_by_tag(
    tag_name: str,
    use_case: FromDishka[ListPostsByTagUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> ListPostsResponse:
    """List the posts labeled with ``tag_name``.

    Inactive posts are only included for their author.

    Example:
        GET /tags/rust/posts
    """
    requester_id = jwt_service.get_user_id_from_token(token)

    with logfire.span("api.list_posts_by_tag", tag_name=tag_name):
        return await use_case.execute(
            ListPostsByTagRequest(tag_name=tag_name, requester_id=requester_id)
        )
