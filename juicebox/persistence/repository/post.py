"""PostgreSQL implementation of Post repository."""

from typing import Any, Mapping, Optional

import logfire
from sqlalchemy import Integer, delete, literal, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from juicebox.domain.model import PostRecord, Tag
from juicebox.domain.repository.post import PostRepository
from juicebox.domain.value import PostField, PostId, TagId, UserId
from juicebox.persistence.mappers import row_to_post_record, row_to_tag
from juicebox.persistence.tables import post_tags_table, posts_table, tags_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, author_id: UserId, title: str, content: str) -> PostRecord:
        """Insert a post row."""
        with logfire.span("post_repository.insert", author_id=author_id, title=title):
            stmt = (
                insert(posts_table)
                .values(author_id=author_id, title=title, content=content)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            return row_to_post_record(dict(row))

    async def find_by_id(self, post_id: PostId) -> Optional[PostRecord]:
        """Find a post row by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post_record(dict(row)) if row else None

    async def update_fields(
        self, post_id: PostId, fields: Mapping[PostField, Any]
    ) -> None:
        """Update the given scalar columns of a post.

        Column objects are looked up from the allow-list enum, never from
        caller supplied text; values are bound parameters.
        """
        with logfire.span(
            "post_repository.update_fields",
            post_id=post_id,
            fields=[field.value for field in fields],
        ):
            values = {posts_table.c[field.value]: value for field, value in fields.items()}
            stmt = update(posts_table).where(posts_table.c.id == post_id).values(values)
            await self.session.execute(stmt)

    async def find_tags(self, post_id: PostId) -> list[Tag]:
        """Find the tags linked to a post."""
        stmt = (
            select(tags_table)
            .join(post_tags_table, tags_table.c.id == post_tags_table.c.tag_id)
            .where(post_tags_table.c.post_id == post_id)
            .order_by(tags_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]

    async def link_tag(self, post_id: PostId, tag_id: TagId) -> None:
        """Link a tag to a post, ignoring an existing link.

        The pair is selected from ``posts`` so a missing post inserts
        nothing and the caller's final read reports it as not found.
        """
        source = select(posts_table.c.id, literal(tag_id, Integer)).where(
            posts_table.c.id == post_id
        )
        stmt = (
            insert(post_tags_table)
            .from_select(["post_id", "tag_id"], source)
            .on_conflict_do_nothing(
                index_elements=[post_tags_table.c.post_id, post_tags_table.c.tag_id]
            )
        )
        await self.session.execute(stmt)

    async def unlink_tags_except(self, post_id: PostId, keep: list[TagId]) -> None:
        """Remove every tag link of a post whose tag is not in ``keep``."""
        with logfire.span(
            "post_repository.unlink_tags_except", post_id=post_id, keep=list(keep)
        ):
            stmt = delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
            if keep:
                stmt = stmt.where(post_tags_table.c.tag_id.not_in(keep))
            await self.session.execute(stmt)

    async def find_ids(self) -> list[PostId]:
        """Find the ids of all posts."""
        stmt = select(posts_table.c.id).order_by(posts_table.c.id)
        result = await self.session.execute(stmt)
        return [PostId(post_id) for post_id in result.scalars().all()]

    async def find_ids_by_author(self, author_id: UserId) -> list[PostId]:
        """Find the ids of all posts written by a user."""
        stmt = (
            select(posts_table.c.id)
            .where(posts_table.c.author_id == author_id)
            .order_by(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [PostId(post_id) for post_id in result.scalars().all()]

    async def find_ids_by_tag_name(self, name: str) -> list[PostId]:
        """Find the ids of all posts linked to the named tag."""
        stmt = (
            select(posts_table.c.id)
            .join(post_tags_table, posts_table.c.id == post_tags_table.c.post_id)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(tags_table.c.name == name)
            .order_by(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [PostId(post_id) for post_id in result.scalars().all()]
