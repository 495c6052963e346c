"""Bearer token handling for API routes."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from juicebox.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from juicebox.domain.error import UserNotFoundError
from juicebox.domain.model import PublicUser
from juicebox.interface.error import AuthorizationHeaderError
from juicebox.util.jwt import JWTError

_bearer = HTTPBearer(auto_error=False)


def bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str | None:
    """Extract the token from ``Authorization: Bearer <token>``, if any."""
    return credentials.credentials if credentials else None


async def require_user(
    token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> PublicUser:
    """Resolve the authenticated user for a protected route.

    Raises:
        AuthorizationHeaderError: If the token is missing, invalid, expired
            or names a user that no longer exists
    """
    if not token:
        raise AuthorizationHeaderError()

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except (JWTError, UserNotFoundError) as e:
        raise AuthorizationHeaderError(str(e)) from e
