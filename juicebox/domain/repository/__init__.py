"""Repository interfaces for the Juicebox domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from juicebox.domain.repository.post import PostRepository
from juicebox.domain.repository.tag import TagRepository
from juicebox.domain.repository.user import UserRepository

__all__ = [
    "PostRepository",
    "TagRepository",
    "UserRepository",
]
