"""List posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from juicebox.domain.model import Post
from juicebox.domain.service import PostService
from juicebox.domain.value import UserId

from .visibility import filter_visible


class ListPostsRequest(BaseModel):
    """List posts request."""

    requester_id: Optional[int] = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[Post]


class ListPostsUseCase:
    """Use case for listing every visible post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow."""
        requester_id = (
            UserId(request.requester_id) if request.requester_id is not None else None
        )

        with logfire.span("list_posts", requester_id=requester_id):
            posts = await self.post_service.get_all_posts()
            visible = filter_visible(posts, requester_id)
            logfire.info("Posts listed", total=len(posts), visible=len(visible))
            return ListPostsResponse(posts=visible)
