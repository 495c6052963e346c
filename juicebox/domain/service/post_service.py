"""Post domain service.

Composes the post aggregate from the ``posts``, ``post_tags``/``tags`` and
``users`` relations, and writes posts together with their tag links.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

import logfire

from juicebox.domain.error import PostNotFoundError
from juicebox.domain.model import Post
from juicebox.domain.repository import PostRepository, UserRepository
from juicebox.domain.value import PostField, PostId, TagName, UserId

from .base import Service, parse_fields
from .tag_service import TagService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        tag_service: TagService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            user_repository: User repository, for author summaries
            tag_service: Tag service, for resolving tag names
        """
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.tag_service = tag_service

    async def assemble(self, post_id: PostId) -> Post:
        """Build the post aggregate from its three relations.

        Args:
            post_id: Post ID

        Returns:
            A freshly composed aggregate with tags and author embedded

        Raises:
            PostNotFoundError: If no post has this id
        """
        with logfire.span("post_service.assemble", post_id=post_id):
            record = await self.post_repository.find_by_id(post_id)
            if record is None:
                logfire.warn("Post not found", post_id=post_id)
                raise PostNotFoundError(post_id)

            tags = await self.post_repository.find_tags(post_id)
            author = await self.user_repository.find_author(record.author_id)
            if author is None:
                # Dangling author_id; surfaced as-is rather than repaired
                logfire.warn(
                    "Post author missing", post_id=post_id, author_id=record.author_id
                )

            return Post(
                id=record.id,
                title=record.title,
                content=record.content,
                active=record.active,
                tags=tags,
                author=author,
            )

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post aggregate by ID.

        Raises:
            PostNotFoundError: If no post has this id
        """
        return await self.assemble(post_id)

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str,
        tag_names: Iterable[str | TagName] = (),
    ) -> Post:
        """Create a post and link it to its tags.

        Args:
            author_id: Authoring user
            title: Post title
            content: Post body
            tag_names: Names of the tags to label the post with

        Returns:
            The aggregate as re-read after all writes
        """
        with logfire.span("post_service.create_post", author_id=author_id, title=title):
            record = await self.post_repository.insert(author_id, title, content)
            tags = await self.tag_service.resolve_tags(tag_names)
            for tag in tags:
                await self.post_repository.link_tag(record.id, tag.id)

            logfire.info("Post created", post_id=record.id, tags=len(tags))
            return await self.assemble(record.id)

    async def update_post(
        self,
        post_id: PostId,
        fields: Mapping[str, Any] | None = None,
        tag_names: Optional[Iterable[str | TagName]] = None,
    ) -> Post:
        """Apply a partial update to a post and optionally replace its tags.

        Only the keys present in ``fields`` are written; no UPDATE is issued
        when there are none. ``tag_names=None`` leaves the tags untouched,
        any other value (an empty list included) becomes the post's exact
        tag set.

        Args:
            post_id: Post to update
            fields: Subset of ``title``, ``content`` and ``active``
            tag_names: Desired tag set, or None to keep the current one

        Returns:
            The aggregate as re-read after all writes

        Raises:
            UnknownFieldError: If ``fields`` names a non-updatable attribute
            PostNotFoundError: If the post does not exist
        """
        updates = parse_fields(fields or {}, PostField, "post")

        with logfire.span(
            "post_service.update_post",
            post_id=post_id,
            fields=[field.value for field in updates],
            replace_tags=tag_names is not None,
        ):
            if updates:
                await self.post_repository.update_fields(post_id, updates)

            if tag_names is None:
                return await self.assemble(post_id)

            tags = await self.tag_service.resolve_tags(tag_names)
            await self.post_repository.unlink_tags_except(
                post_id, [tag.id for tag in tags]
            )
            for tag in tags:
                await self.post_repository.link_tag(post_id, tag.id)

            logfire.info("Post tags reconciled", post_id=post_id, tags=len(tags))
            return await self.assemble(post_id)

    async def get_all_posts(self) -> list[Post]:
        """Get every post as an aggregate."""
        with logfire.span("post_service.get_all_posts"):
            post_ids = await self.post_repository.find_ids()
            return [await self.assemble(post_id) for post_id in post_ids]

    async def get_posts_by_user(self, user_id: UserId) -> list[Post]:
        """Get every post written by a user."""
        with logfire.span("post_service.get_posts_by_user", user_id=user_id):
            post_ids = await self.post_repository.find_ids_by_author(user_id)
            return [await self.assemble(post_id) for post_id in post_ids]

    async def get_posts_by_tag_name(self, name: str) -> list[Post]:
        """Get every post labeled with the named tag.

        Each post is assembled separately, one aggregate read per post.
        """
        with logfire.span("post_service.get_posts_by_tag_name", tag_name=name):
            post_ids = await self.post_repository.find_ids_by_tag_name(name)
            posts = [await self.assemble(post_id) for post_id in post_ids]
            logfire.info("Posts found for tag", tag_name=name, count=len(posts))
            return posts
