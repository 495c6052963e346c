"""List posts by tag use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from juicebox.application.usecase.post.list_posts import ListPostsResponse
from juicebox.application.usecase.post.visibility import filter_visible
from juicebox.domain.service import PostService
from juicebox.domain.value import UserId


class ListPostsByTagRequest(BaseModel):
    """List posts by tag request."""

    tag_name: str
    requester_id: Optional[int] = None


class ListPostsByTagUseCase:
    """Use case for listing the visible posts labeled with a tag."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts by tag use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsByTagRequest) -> ListPostsResponse:
        """Execute list posts by tag flow.

        An unknown tag name yields an empty list.
        """
        requester_id = (
            UserId(request.requester_id) if request.requester_id is not None else None
        )

        with logfire.span("list_posts_by_tag", tag_name=request.tag_name):
            posts = await self.post_service.get_posts_by_tag_name(request.tag_name)
            return ListPostsResponse(posts=filter_visible(posts, requester_id))
