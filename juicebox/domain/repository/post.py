"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from juicebox.domain.model import PostRecord, Tag
from juicebox.domain.value import PostField, PostId, TagId, UserId


class PostRepository(ABC):
    """Repository for the ``posts`` and ``post_tags`` relations.

    Exposes single statements only. Composing them into aggregates and
    reconciling tag sets is the job of ``PostService``.
    """

    @abstractmethod
    async def insert(self, author_id: UserId, title: str, content: str) -> PostRecord:
        """Insert a post row.

        Args:
            author_id: Id of the authoring user
            title: Post title
            content: Post body

        Returns:
            The inserted row with its generated id
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[PostRecord]:
        """Find a post row by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The row if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_fields(
        self, post_id: PostId, fields: Mapping[PostField, Any]
    ) -> None:
        """Update the given scalar columns of a post.

        Args:
            post_id: Post to update
            fields: Non-empty mapping of allow-listed fields to new values
        """
        pass

    @abstractmethod
    async def find_tags(self, post_id: PostId) -> list[Tag]:
        """Find the tags linked to a post through ``post_tags``.

        Args:
            post_id: Post identifier

        Returns:
            Linked tags ordered by tag id
        """
        pass

    @abstractmethod
    async def link_tag(self, post_id: PostId, tag_id: TagId) -> None:
        """Link a tag to a post; linking an existing pair is a no-op.

        Args:
            post_id: Post identifier
            tag_id: Tag identifier
        """
        pass

    @abstractmethod
    async def unlink_tags_except(self, post_id: PostId, keep: list[TagId]) -> None:
        """Remove every tag link of a post whose tag is not in ``keep``.

        An empty ``keep`` removes all links of the post.

        Args:
            post_id: Post identifier
            keep: Tag ids that stay linked
        """
        pass

    @abstractmethod
    async def find_ids(self) -> list[PostId]:
        """Find the ids of all posts, ordered by id."""
        pass

    @abstractmethod
    async def find_ids_by_author(self, author_id: UserId) -> list[PostId]:
        """Find the ids of all posts written by a user, ordered by id."""
        pass

    @abstractmethod
    async def find_ids_by_tag_name(self, name: str) -> list[PostId]:
        """Find the ids of all posts linked to the tag with this name."""
        pass
