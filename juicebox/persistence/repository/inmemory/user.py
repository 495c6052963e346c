"""In-memory user repository for testing."""

from typing import Any, Mapping, Optional

from juicebox.domain.model import Author, PublicUser, User
from juicebox.domain.repository import UserRepository
from juicebox.domain.value import UserField, UserId, Username
from juicebox.persistence.mappers import row_to_author, row_to_public_user, row_to_user

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def insert(
        self,
        username: Username,
        password: str,
        name: Optional[str],
        location: Optional[str],
    ) -> Optional[User]:
        """Insert a user unless the username is taken."""
        if any(row["username"] == username.root for row in self.store.users.values()):
            return None

        user_id = self.store.next_user_id()
        row = {
            "id": user_id,
            "username": username.root,
            "password": password,
            "name": name,
            "location": location,
            "active": True,
        }
        self.store.users[user_id] = row
        return row_to_user(row)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        row = self.store.users.get(user_id)
        return row_to_user(row) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for row in self.store.users.values():
            if row["username"] == username.root:
                return row_to_user(row)
        return None

    async def find_author(self, user_id: UserId) -> Optional[Author]:
        """Read the author summary of a user."""
        row = self.store.users.get(user_id)
        return row_to_author(row) if row else None

    async def update_fields(
        self, user_id: UserId, fields: Mapping[UserField, Any]
    ) -> Optional[User]:
        """Update the given columns of a user."""
        row = self.store.users.get(user_id)
        if row is None:
            return None
        for field, value in fields.items():
            row[field.value] = value
        return row_to_user(row)

    async def find_all(self) -> list[PublicUser]:
        """Find all users without credentials."""
        return [row_to_public_user(row) for _, row in sorted(self.store.users.items())]
