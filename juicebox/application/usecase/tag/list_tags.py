"""List tags use case."""

import logfire
from pydantic import BaseModel

from juicebox.domain.model import Tag
from juicebox.domain.service import TagService


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[Tag]


class ListTagsUseCase:
    """Use case for listing every tag."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self) -> ListTagsResponse:
        """Execute list tags flow."""
        with logfire.span("list_tags"):
            tags = await self.tag_service.get_all_tags()
            return ListTagsResponse(tags=tags)
