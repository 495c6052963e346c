"""Tag repository interface."""

from abc import ABC, abstractmethod

from juicebox.domain.model.tag import Tag
from juicebox.domain.value import TagName


class TagRepository(ABC):
    """Repository interface for Tag entities."""

    @abstractmethod
    async def insert_missing(self, names: list[TagName]) -> None:
        """Insert a tag row for every name that has none yet.

        Must be conflict tolerant: names that already exist, including rows
        created concurrently by another caller, are skipped without error.

        Args:
            names: Tag names to ensure
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags.

        Returns:
            List of tags ordered by id
        """
        pass
