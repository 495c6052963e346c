"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from juicebox.domain.model import Author, PublicUser, User
from juicebox.domain.value import UserField, UserId, Username


class UserRepository(ABC):
    """Repository for the ``users`` relation."""

    @abstractmethod
    async def insert(
        self,
        username: Username,
        password: str,
        name: Optional[str],
        location: Optional[str],
    ) -> Optional[User]:
        """Insert a user unless the username is taken.

        Args:
            username: Unique username
            password: Credential hash to store
            name: Display name
            location: Free-form location

        Returns:
            The inserted user, or None when the username already exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, credential included."""
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, credential included."""
        pass

    @abstractmethod
    async def find_author(self, user_id: UserId) -> Optional[Author]:
        """Read the public author summary of a user.

        Only id, username, name and location are selected.
        """
        pass

    @abstractmethod
    async def update_fields(
        self, user_id: UserId, fields: Mapping[UserField, Any]
    ) -> Optional[User]:
        """Update the given columns of a user.

        Args:
            user_id: User to update
            fields: Non-empty mapping of allow-listed fields to new values

        Returns:
            The updated user, or None if no row matched
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[PublicUser]:
        """Find all users without their credentials, ordered by id."""
        pass
