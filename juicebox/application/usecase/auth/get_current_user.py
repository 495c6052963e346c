"""Get current user use case."""

from pydantic import BaseModel

from juicebox.domain.error import UserNotFoundError
from juicebox.domain.model import PublicUser
from juicebox.domain.service import JWTService, UserService
from juicebox.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a bearer token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> PublicUser:
        """Execute get current user flow.

        Raises:
            JWTError: If token is invalid or expired
            UserNotFoundError: If the token names a user that no longer exists
                or has been deactivated
        """
        # Verify token (raises JWTError if invalid)
        payload = self.jwt_service.verify_token(request.token)
        user_id = UserId(payload.user_id)

        user = await self.user_service.get_public_user(user_id)
        # A deactivated account keeps no session
        if user is None or not user.active:
            raise UserNotFoundError(user_id)

        return user
