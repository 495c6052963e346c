"""Domain models for Juicebox."""

from juicebox.domain.model.post import Post, PostRecord
from juicebox.domain.model.profile import UserProfile
from juicebox.domain.model.tag import Tag
from juicebox.domain.model.user import Author, PublicUser, User

__all__ = [
    "Author",
    "Post",
    "PostRecord",
    "PublicUser",
    "Tag",
    "User",
    "UserProfile",
]
