"""Post aggregate and its scalar row."""

from typing import Optional

from pydantic import Field

from juicebox.domain.model.common import DomainModel
from juicebox.domain.model.tag import Tag
from juicebox.domain.model.user import Author
from juicebox.domain.value import PostId, UserId


class PostRecord(DomainModel):
    """Scalar post row as stored in the ``posts`` table."""

    id: PostId
    author_id: UserId
    title: str
    content: str
    active: bool = True


class Post(DomainModel):
    """Post aggregate root.

    Composed from three relations: the scalar post row, the tags joined
    through ``post_tags`` and the author's public summary. The raw author
    id is not part of the aggregate; ``author`` is ``None`` only when the
    referenced user row is missing.
    """

    id: PostId
    title: str
    content: str
    active: bool = True
    tags: list[Tag] = Field(default_factory=list)
    author: Optional[Author] = None

    @property
    def tag_names(self) -> set[str]:
        """Names of the tags currently linked to this post."""
        return {tag.name.root for tag in self.tags}

    def is_visible_to(self, user_id: Optional[UserId]) -> bool:
        """Whether the requester may see this post.

        Active posts are public; inactive posts are shown to their author only.
        """
        if self.active:
            return True
        return (
            user_id is not None
            and self.author is not None
            and self.author.id == user_id
        )
