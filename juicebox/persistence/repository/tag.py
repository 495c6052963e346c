"""PostgreSQL implementation of Tag repository."""

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from juicebox.domain.model.tag import Tag
from juicebox.domain.repository.tag import TagRepository
from juicebox.domain.value import TagName
from juicebox.persistence.mappers import row_to_tag
from juicebox.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def insert_missing(self, names: list[TagName]) -> None:
        """Insert missing tags in one statement, skipping existing names.

        Rows go in name order so concurrent transactions inserting
        overlapping names take their row locks in the same order.
        """
        if not names:
            return

        ordered = sorted(name.root for name in names)
        stmt = (
            insert(tags_table)
            .values([{"name": name} for name in ordered])
            .on_conflict_do_nothing(index_elements=[tags_table.c.name])
        )
        await self.session.execute(stmt)

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = (
            select(tags_table)
            .where(tags_table.c.name.in_([name.root for name in names]))
            .order_by(tags_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]

    async def find_all(self) -> list[Tag]:
        """Find all tags."""
        stmt = select(tags_table).order_by(tags_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]
