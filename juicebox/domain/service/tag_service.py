"""Tag domain service."""

from collections.abc import Iterable

import logfire

from juicebox.domain.model.tag import Tag
from juicebox.domain.repository.tag import TagRepository
from juicebox.domain.value import TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def resolve_tags(self, names: Iterable[str | TagName]) -> list[Tag]:
        """Turn tag names into persisted tags, creating the missing ones.

        Missing names are inserted with a conflict tolerant statement, then
        every tag named in the input is read back. Reading back after the
        insert also picks up rows another caller created first, so the
        result always holds exactly one tag per distinct name.

        Args:
            names: Tag names, duplicates allowed

        Returns:
            One tag per distinct name; empty for empty input
        """
        tag_names = _distinct(names)
        if not tag_names:
            return []

        with logfire.span(
            "tag_service.resolve_tags", tags=[name.root for name in tag_names]
        ):
            await self.tag_repository.insert_missing(tag_names)
            tags = await self.tag_repository.find_by_names(tag_names)
            logfire.info("Tags resolved", count=len(tags))
            return tags

    async def get_all_tags(self) -> list[Tag]:
        """Get all tags.

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags


def _distinct(names: Iterable[str | TagName]) -> list[TagName]:
    """Validate names and drop duplicates, keeping first-seen order."""
    seen: dict[str, TagName] = {}
    for name in names:
        tag_name = name if isinstance(name, TagName) else TagName(name)
        seen.setdefault(tag_name.root, tag_name)
    return list(seen.values())
