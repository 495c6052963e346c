"""In-memory implementation of Post repository for testing."""

from typing import Any, Mapping, Optional

from juicebox.domain.model import PostRecord, Tag
from juicebox.domain.repository.post import PostRepository
from juicebox.domain.value import PostField, PostId, TagId, UserId
from juicebox.persistence.mappers import row_to_post_record, row_to_tag

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def insert(self, author_id: UserId, title: str, content: str) -> PostRecord:
        """Insert a post row."""
        post_id = self.store.next_post_id()
        row = {
            "id": post_id,
            "author_id": author_id,
            "title": title,
            "content": content,
            "active": True,
        }
        self.store.posts[post_id] = row
        return row_to_post_record(row)

    async def find_by_id(self, post_id: PostId) -> Optional[PostRecord]:
        """Find a post row by ID."""
        row = self.store.posts.get(post_id)
        return row_to_post_record(row) if row else None

    async def update_fields(
        self, post_id: PostId, fields: Mapping[PostField, Any]
    ) -> None:
        """Update the given scalar columns of a post."""
        row = self.store.posts.get(post_id)
        if row is None:
            return
        for field, value in fields.items():
            row[field.value] = value

    async def find_tags(self, post_id: PostId) -> list[Tag]:
        """Find the tags linked to a post."""
        tag_ids = sorted(tid for pid, tid in self.store.post_tags if pid == post_id)
        return [row_to_tag(self.store.tags[tag_id]) for tag_id in tag_ids]

    async def link_tag(self, post_id: PostId, tag_id: TagId) -> None:
        """Link a tag to a post; missing posts are skipped."""
        if post_id in self.store.posts:
            self.store.post_tags.add((post_id, tag_id))

    async def unlink_tags_except(self, post_id: PostId, keep: list[TagId]) -> None:
        """Remove every tag link of a post whose tag is not in ``keep``."""
        kept = set(keep)
        self.store.post_tags = {
            (pid, tid)
            for pid, tid in self.store.post_tags
            if pid != post_id or tid in kept
        }

    async def find_ids(self) -> list[PostId]:
        """Find the ids of all posts."""
        return [PostId(post_id) for post_id in sorted(self.store.posts)]

    async def find_ids_by_author(self, author_id: UserId) -> list[PostId]:
        """Find the ids of all posts written by a user."""
        return [
            PostId(post_id)
            for post_id, row in sorted(self.store.posts.items())
            if row["author_id"] == author_id
        ]

    async def find_ids_by_tag_name(self, name: str) -> list[PostId]:
        """Find the ids of all posts linked to the named tag."""
        tag_ids = {tid for tid, row in self.store.tags.items() if row["name"] == name}
        return sorted(
            {PostId(pid) for pid, tid in self.store.post_tags if tid in tag_ids}
        )
