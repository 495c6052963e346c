"""Update post use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from juicebox.domain.error import NotAuthorizedError
from juicebox.domain.model import Post
from juicebox.domain.service import PostService
from juicebox.domain.value import PostId, TagName, UserId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: int
    user_id: int  # Current user ID (must be author)
    fields: dict[str, Any] = {}  # Scalar attributes to change
    tags: Optional[list[TagName]] = None  # None leaves the tags untouched


class UpdatePostUseCase:
    """Use case for editing a post and its tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> Post:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            The post aggregate as stored after the update

        Raises:
            PostNotFoundError: If the post does not exist
            NotAuthorizedError: If the user did not write the post
            UnknownFieldError: If ``fields`` names a non-updatable attribute
        """
        post_id = PostId(request.post_id)
        user_id = UserId(request.user_id)

        # 1. Retrieve existing post (raises PostNotFoundError)
        post = await self.post_service.get_post_by_id(post_id)

        # 2. Check authorization (user owns post)
        if post.author is None or post.author.id != user_id:
            logfire.warn("Post update rejected", post_id=post_id, user_id=user_id)
            raise NotAuthorizedError("post", str(post_id), str(user_id))

        # 3. Update via service
        return await self.post_service.update_post(
            post_id, fields=request.fields, tag_names=request.tags
        )
