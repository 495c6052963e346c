"""User domain service."""

from collections.abc import Mapping
from typing import Any, Optional

import logfire

from juicebox.config import AuthSettings
from juicebox.domain.error import ValidationError
from juicebox.domain.model import PublicUser, User, UserProfile
from juicebox.domain.repository import UserRepository
from juicebox.domain.value import UserField, UserId, Username
from juicebox.util.password import (
    MAX_PASSWORD_BYTES,
    hash_password,
    password_too_long,
)

from .base import Service, parse_fields
from .post_service import PostService


class UserService(Service):
    """Domain service for user operations.

    Only ``get_user_by_username`` returns the stored credential hash; it
    exists for the authentication path. Every other read strips it.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        post_service: PostService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_service: Post service, for embedding a user's posts
            auth_settings: Authentication settings (hash cost)
        """
        self.user_repository = user_repository
        self.post_service = post_service
        self.auth_settings = auth_settings

    async def create_user(
        self,
        username: str | Username,
        password: str,
        name: Optional[str] = None,
        location: Optional[str] = None,
    ) -> Optional[PublicUser]:
        """Register a user.

        Args:
            username: Unique username
            password: Plain-text password, stored hashed
            name: Display name
            location: Free-form location

        Returns:
            The new user, or None when the username is already taken

        Raises:
            ValidationError: If the password is longer than bcrypt accepts
        """
        username = username if isinstance(username, Username) else Username(username)

        with logfire.span("user_service.create_user", username=username.root):
            user = await self.user_repository.insert(
                username,
                self._hash_password(password),
                name,
                location,
            )
            if user is None:
                logfire.warn("Username already taken", username=username.root)
                return None

            logfire.info("User created", user_id=user.id, username=username.root)
            return PublicUser.from_user(user)

    async def get_user_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Get a user's public profile with their posts.

        Args:
            user_id: User ID

        Returns:
            Profile without credential, or None if not found
        """
        with logfire.span("user_service.get_user_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=user_id)
                return None

            posts = await self.post_service.get_posts_by_user(user_id)
            return UserProfile(
                id=user.id,
                username=user.username,
                name=user.name,
                location=user.location,
                active=user.active,
                posts=posts,
            )

    async def get_public_user(self, user_id: UserId) -> Optional[PublicUser]:
        """Get a user without credential or posts."""
        user = await self.user_repository.find_by_id(user_id)
        return PublicUser.from_user(user) if user else None

    async def get_user_by_username(self, username: str | Username) -> Optional[User]:
        """Get the stored user row, credential hash included.

        Reserved for authentication; never return the result to a client.
        """
        username = username if isinstance(username, Username) else Username(username)

        with logfire.span("user_service.get_user_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if user is None:
                logfire.warn("User not found", username=username.root)
            return user

    async def update_user(
        self, user_id: UserId, fields: Mapping[str, Any]
    ) -> Optional[PublicUser]:
        """Apply a partial update to a user.

        Args:
            user_id: User to update
            fields: Subset of ``name``, ``location``, ``active``, ``password``

        Returns:
            The updated user, or None when ``fields`` is empty or no such user

        Raises:
            UnknownFieldError: If ``fields`` names a non-updatable attribute
            ValidationError: If a new password is longer than bcrypt accepts
        """
        updates = parse_fields(fields, UserField, "user")
        if not updates:
            return None

        if UserField.PASSWORD in updates:
            updates[UserField.PASSWORD] = self._hash_password(
                updates[UserField.PASSWORD]
            )

        with logfire.span(
            "user_service.update_user",
            user_id=user_id,
            fields=[field.value for field in updates],
        ):
            user = await self.user_repository.update_fields(user_id, updates)
            if user is None:
                logfire.warn("User not found for update", user_id=user_id)
                return None
            return PublicUser.from_user(user)

    async def get_all_users(self) -> list[PublicUser]:
        """Get every user without credentials."""
        with logfire.span("user_service.get_all_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users retrieved", count=len(users))
            return users

    def _hash_password(self, password: str) -> str:
        if password_too_long(password):
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )
        return hash_password(password, self.auth_settings.bcrypt_rounds)
