"""Get user profile use case."""

from typing import Optional

from pydantic import BaseModel

from juicebox.application.usecase.post.visibility import filter_visible
from juicebox.domain.error import UserNotFoundError
from juicebox.domain.model import UserProfile
from juicebox.domain.service import UserService
from juicebox.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user profile request."""

    user_id: int
    requester_id: Optional[int] = None


class GetUserUseCase:
    """Use case for reading a user's public profile and posts."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserProfile:
        """Execute get user flow.

        The embedded posts go through the same visibility rule as every other
        post listing.

        Raises:
            UserNotFoundError: If no user has this id
        """
        user_id = UserId(request.user_id)
        requester_id = (
            UserId(request.requester_id) if request.requester_id is not None else None
        )

        profile = await self.user_service.get_user_by_id(user_id)
        if profile is None:
            raise UserNotFoundError(user_id)

        return profile.model_copy(
            update={"posts": filter_visible(profile.posts, requester_id)}
        )
