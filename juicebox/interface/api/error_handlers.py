"""Global exception handlers.

Every error leaves the API as ``{"name": ..., "message": ...}``. Domain
errors map to a status by kind; anything else becomes a generic 500 that
does not leak internal details.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from juicebox.domain.error import (
    DomainError,
    IncorrectCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    UserExistsError,
    ValidationError,
)
from juicebox.interface.error import AuthorizationHeaderError

# Checked in order, first match wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UserExistsError, status.HTTP_409_CONFLICT),
    (IncorrectCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
]


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_authorization_error_handler(app)
    _register_value_error_handler(app)
    _register_generic_error_handler(app)


def error_body(name: str, message: str) -> dict[str, str]:
    """Build the error payload returned by every handler."""
    return {"name": name, "message": message}


def status_for(exc: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        """Handle all domain errors."""
        logfire.warn(
            "Domain error", name=exc.name, error=exc.message, path=request.url.path
        )
        return JSONResponse(
            status_code=status_for(exc), content=error_body(exc.name, exc.message)
        )


def _register_authorization_error_handler(app: FastAPI) -> None:
    @app.exception_handler(AuthorizationHeaderError)
    async def authorization_error_handler(
        request: Request, exc: AuthorizationHeaderError
    ):
        """Handle missing or invalid bearer tokens."""
        logfire.info("Unauthenticated request", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=error_body(exc.name, exc.message),
            headers={"WWW-Authenticate": "Bearer"},
        )


def _register_value_error_handler(app: FastAPI) -> None:
    @app.exception_handler(PydanticValidationError)
    async def value_error_handler(request: Request, exc: PydanticValidationError):
        """Handle value objects rejected after request parsing (tag names, usernames)."""
        logfire.warn("Invalid value", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("ValidationError", str(exc)),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logfire.exception("Unhandled exception", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("InternalServerError", "An unexpected error occurred"),
        )
