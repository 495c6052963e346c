"""Delete post use case."""

import logfire
from pydantic import BaseModel

from juicebox.domain.error import NotAuthorizedError
from juicebox.domain.model import Post
from juicebox.domain.service import PostService
from juicebox.domain.value import PostField, PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    user_id: int  # Current user ID (must be author)


class DeletePostUseCase:
    """Use case for deactivating a post.

    Posts are never removed; deleting clears the ``active`` flag so the post
    stays visible to its author only.
    """

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> Post:
        """Execute delete post flow.

        Raises:
            PostNotFoundError: If the post does not exist
            NotAuthorizedError: If the user did not write the post
        """
        post_id = PostId(request.post_id)
        user_id = UserId(request.user_id)

        post = await self.post_service.get_post_by_id(post_id)
        if post.author is None or post.author.id != user_id:
            raise NotAuthorizedError("post", str(post_id), str(user_id))

        with logfire.span("delete_post", post_id=post_id, user_id=user_id):
            return await self.post_service.update_post(
                post_id, fields={PostField.ACTIVE: False}
            )
