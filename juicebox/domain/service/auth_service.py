"""Authentication domain service."""

import logfire

from juicebox.domain.error import IncorrectCredentialsError
from juicebox.domain.model import User
from juicebox.util.password import verify_password

from .base import Service
from .user_service import UserService


class AuthService(Service):
    """Domain service for password authentication.

    The only consumer of ``UserService.get_user_by_username``, which returns
    the stored credential hash.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize auth service.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def authenticate(self, username: str, password: str) -> User:
        """Check a username/password pair.

        Args:
            username: Username
            password: Plain-text password

        Returns:
            The authenticated user

        Raises:
            IncorrectCredentialsError: If the user is unknown, inactive or
                the password does not match
        """
        with logfire.span("auth_service.authenticate", username=username):
            user = await self.user_service.get_user_by_username(username)
            if user is None or not user.active:
                raise IncorrectCredentialsError()
            if not verify_password(password, user.password):
                logfire.warn("Password mismatch", username=username)
                raise IncorrectCredentialsError()

            logfire.info("User authenticated", user_id=user.id)
            return user
