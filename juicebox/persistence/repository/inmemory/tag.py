"""In-memory implementation of Tag repository for testing."""

from juicebox.domain.model.tag import Tag
from juicebox.domain.repository.tag import TagRepository
from juicebox.domain.value import TagName
from juicebox.persistence.mappers import row_to_tag

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def insert_missing(self, names: list[TagName]) -> None:
        """Insert tags whose names are not present yet."""
        existing = {row["name"] for row in self.store.tags.values()}
        for name in names:
            if name.root in existing:
                continue
            tag_id = self.store.next_tag_id()
            self.store.tags[tag_id] = {"id": tag_id, "name": name.root}
            existing.add(name.root)

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        wanted = {name.root for name in names}
        return [
            row_to_tag(row)
            for tag_id, row in sorted(self.store.tags.items())
            if row["name"] in wanted
        ]

    async def find_all(self) -> list[Tag]:
        """Find all tags."""
        return [row_to_tag(row) for _, row in sorted(self.store.tags.items())]
