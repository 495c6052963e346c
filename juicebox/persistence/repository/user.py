"""PostgreSQL implementation of User repository."""

from typing import Any, Mapping, Optional

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from juicebox.domain.model import Author, PublicUser, User
from juicebox.domain.repository import UserRepository
from juicebox.domain.value import UserField, UserId, Username
from juicebox.persistence.mappers import row_to_author, row_to_public_user, row_to_user
from juicebox.persistence.tables import users_table

# Columns that are safe to hand outward
_public_columns = (
    users_table.c.id,
    users_table.c.username,
    users_table.c.name,
    users_table.c.location,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(
        self,
        username: Username,
        password: str,
        name: Optional[str],
        location: Optional[str],
    ) -> Optional[User]:
        """Insert a user unless the username is taken.

        ``ON CONFLICT DO NOTHING RETURNING`` yields no row on conflict.
        """
        stmt = (
            insert(users_table)
            .values(
                username=username.root,
                password=password,
                name=name,
                location=location,
            )
            .on_conflict_do_nothing(index_elements=[users_table.c.username])
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_author(self, user_id: UserId) -> Optional[Author]:
        """Read the author summary of a user."""
        stmt = select(*_public_columns).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_author(dict(row)) if row else None

    async def update_fields(
        self, user_id: UserId, fields: Mapping[UserField, Any]
    ) -> Optional[User]:
        """Update the given columns of a user."""
        values = {users_table.c[field.value]: value for field, value in fields.items()}
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(values)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(self) -> list[PublicUser]:
        """Find all users without credentials."""
        stmt = select(*_public_columns, users_table.c.active).order_by(users_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_public_user(dict(row)) for row in result.mappings().all()]
