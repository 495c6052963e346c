"""User profile read model."""

from pydantic import Field

from juicebox.domain.model.post import Post
from juicebox.domain.model.user import PublicUser


class UserProfile(PublicUser):
    """Public user with the posts they authored."""

    posts: list[Post] = Field(default_factory=list)
