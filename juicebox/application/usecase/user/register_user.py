"""Register user use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from juicebox.domain.error import UserExistsError
from juicebox.domain.service import JWTService, UserService
from juicebox.domain.value import Username


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: Username
    password: str
    name: Optional[str] = None
    location: Optional[str] = None


class RegisterUserResponse(BaseModel):
    """Register user response."""

    message: str
    token: str


class RegisterUserUseCase:
    """Use case for creating an account and logging it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration flow.

        Raises:
            UserExistsError: If the username is already taken
        """
        with logfire.span("register_user", username=request.username.root):
            user = await self.user_service.create_user(
                request.username, request.password, request.name, request.location
            )
            if user is None:
                raise UserExistsError(request.username.root)

            token = self.jwt_service.create_token(user.id, user.username.root)
            return RegisterUserResponse(message="thank you for signing up", token=token)
