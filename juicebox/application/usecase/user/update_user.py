"""Update user use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from juicebox.domain.error import UserNotFoundError
from juicebox.domain.model import PublicUser
from juicebox.domain.service import UserService
from juicebox.domain.value import UserId


class UpdateUserRequest(BaseModel):
    """Update user request."""

    user_id: int  # Current user ID
    fields: dict[str, Any] = {}


class UpdateUserUseCase:
    """Use case for editing the current user's account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> PublicUser:
        """Execute update user flow.

        An empty update writes nothing and returns the user as stored.

        Raises:
            UnknownFieldError: If ``fields`` names a non-updatable attribute
            UserNotFoundError: If the user does not exist
        """
        user_id = UserId(request.user_id)

        with logfire.span("update_user", user_id=user_id, fields=list(request.fields)):
            user = await self.user_service.update_user(user_id, request.fields)
            if user is not None:
                return user

            user = await self.user_service.get_public_user(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            return user
