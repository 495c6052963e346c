"""List users use case."""

from pydantic import BaseModel

from juicebox.domain.model import PublicUser
from juicebox.domain.service import UserService


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[PublicUser]


class ListUsersUseCase:
    """Use case for listing every user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self) -> ListUsersResponse:
        """Execute list users flow."""
        users = await self.user_service.get_all_users()
        return ListUsersResponse(users=users)
