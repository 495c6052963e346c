"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
