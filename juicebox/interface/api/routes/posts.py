"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field, field_validator

from juicebox.application.usecase.auth import GetCurrentUserUseCase
from juicebox.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from juicebox.domain.model import Post
from juicebox.domain.service import JWTService
from juicebox.interface.api.auth import bearer_token, require_user

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=255)
    content: str
    tags: list[str] = []

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        """Accept tags as a list or as one whitespace-separated string."""
        if isinstance(v, str):
            return v.split()
        return v


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post.

    Only the attributes present in the body are changed. Omitting ``tags``
    keeps the current tags; an empty list removes them all.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None
    active: bool | None = None
    tags: list[str] | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        """Accept tags as a list or as one whitespace-separated string."""
        if isinstance(v, str):
            return v.split()
        return v


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> ListPostsResponse:
    """List every post visible to the requester."""
    requester_id = jwt_service.get_user_id_from_token(token)
    return await use_case.execute(ListPostsRequest(requester_id=requester_id))


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(bearer_token),
) -> Post:
    """Create a new post.

    Requires authentication.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        get_current_user_use_case: Get current user use case from DI
        token: Bearer token

    Returns:
        Created post with author and tags
    """
    user = await require_user(token, get_current_user_use_case)

    with logfire.span("api.create_post", user_id=user.id):
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user.id,
                title=request.title,
                content=request.content,
                tags=request.tags,
            )
        )


@router.get("/{post_id}", response_model=Post)
async def get_post(
    post_id: int,
    use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> Post:
    """Get a post by ID.

    Inactive posts answer 404 unless the requester wrote them.
    """
    requester_id = jwt_service.get_user_id_from_token(token)
    return await use_case.execute(
        GetPostRequest(post_id=post_id, requester_id=requester_id)
    )


@router.patch("/{post_id}", response_model=Post)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(bearer_token),
) -> Post:
    """Update a post.

    Only the post author can edit.

    Args:
        post_id: Post ID
        request: Attributes to change
        update_post_use_case: Update post use case from DI
        get_current_user_use_case: Get current user use case from DI
        token: Bearer token

    Returns:
        Updated post
    """
    user = await require_user(token, get_current_user_use_case)

    fields = request.model_dump(
        exclude_unset=True, exclude_none=True, exclude={"tags"}
    )
    with logfire.span("api.update_post", post_id=post_id, fields=list(fields)):
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user.id,
                fields=fields,
                tags=request.tags,
            )
        )


@router.delete("/{post_id}", response_model=Post)
async def delete_post(
    post_id: int,
    use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(bearer_token),
) -> Post:
    """Deactivate a post. Only the post author can delete."""
    user = await require_user(token, get_current_user_use_case)
    return await use_case.execute(DeletePostRequest(post_id=post_id, user_id=user.id))
