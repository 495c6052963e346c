"""Login use case."""

import logfire
from pydantic import BaseModel

from juicebox.domain.service import AuthService, JWTService


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    message: str
    token: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            IncorrectCredentialsError: If the username/password pair is wrong
        """
        with logfire.span("login_user", username=request.username):
            user = await self.auth_service.authenticate(
                request.username, request.password
            )
            token = self.jwt_service.create_token(user.id, user.username.root)

            logfire.info("User logged in", user_id=user.id)
            return LoginResponse(message="you're logged in!", token=token)
