"""Create post use case."""

import logfire
from pydantic import BaseModel

from juicebox.domain.model import Post
from juicebox.domain.service import PostService
from juicebox.domain.value import TagName, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: int  # Authenticated user
    title: str
    content: str
    tags: list[TagName] = []


class CreatePostUseCase:
    """Use case for publishing a post with its tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> Post:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The stored post aggregate with its author and tags
        """
        with logfire.span(
            "create_post", author_id=request.author_id, tags=len(request.tags)
        ):
            return await self.post_service.create_post(
                author_id=UserId(request.author_id),
                title=request.title,
                content=request.content,
                tag_names=request.tags,
            )
