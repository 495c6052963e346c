"""User use cases."""

from .get_user import GetUserRequest, GetUserUseCase
from .list_users import ListUsersResponse, ListUsersUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
]
