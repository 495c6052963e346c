"""PostgreSQL repository implementations."""

from juicebox.persistence.repository.post import PostgresPostRepository
from juicebox.persistence.repository.tag import PostgresTagRepository
from juicebox.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
]
