"""Get post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from juicebox.domain.error import PostNotFoundError
from juicebox.domain.model import Post
from juicebox.domain.service import PostService
from juicebox.domain.value import PostId, UserId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int
    requester_id: Optional[int] = None  # None for anonymous requests


class GetPostUseCase:
    """Use case for reading a single post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> Post:
        """Execute get post flow.

        A deactivated post is reported as missing to everyone but its author.

        Raises:
            PostNotFoundError: If the post does not exist or is hidden
        """
        post_id = PostId(request.post_id)
        requester_id = (
            UserId(request.requester_id) if request.requester_id is not None else None
        )

        post = await self.post_service.get_post_by_id(post_id)
        if not post.is_visible_to(requester_id):
            logfire.info("Hidden post requested", post_id=post_id)
            raise PostNotFoundError(post_id)

        return post
