"""Integration tests for the PostgreSQL repositories.

Requires a running PostgreSQL at DATABASE__URL with the schema created
(``python scripts/init_db.py``). Run with JUICEBOX_INTEGRATION=1.
"""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from juicebox.domain.error import PostNotFoundError
from juicebox.domain.repository import TagRepository
from juicebox.domain.service import PostService, TagService, UserService
from juicebox.domain.value import PostId
from tests.di import build_test_container
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)

    await session.execute(
        text("TRUNCATE TABLE post_tags, posts, tags, users RESTART IDENTITY CASCADE")
    )
    await session.commit()

    yield


async def resolve_in_request(container, names):
    """Resolve tags in a request scope of its own, committed on exit."""
    async with container() as request_container:
        tag_service = await request_container.get(TagService)
        return await tag_service.resolve_tags(names)


class TestPostgresRoundTrip:
    """Service flows against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_go_rust_scenario(self, integration_env):
        user_service = await integration_env.get(UserService)
        post_service = await integration_env.get(PostService)
        tag_service = await integration_env.get(TagService)

        user = await user_service.create_user("ada", "secret", "Ada", "London")
        post = await post_service.create_post(user.id, "Langs", "...", ["go", "rust"])
        assert post.tag_names == {"go", "rust"}
        assert post.author.username.root == "ada"

        post = await post_service.update_post(post.id, {"title": "Go"}, ["go"])
        assert post.title == "Go"
        assert post.tag_names == {"go"}

        post = await post_service.update_post(post.id, {}, [])
        assert post.tags == []

        tags = await tag_service.get_all_tags()
        assert {tag.name.root for tag in tags} == {"go", "rust"}

    @pytest.mark.asyncio
    async def test_tag_resolution_is_idempotent(self, integration_env):
        tag_service = await integration_env.get(TagService)
        tag_repo = await integration_env.get(TagRepository)

        first = await tag_service.resolve_tags(["go", "rust"])
        second = await tag_service.resolve_tags(["go", "rust", "zig"])

        assert {tag.id for tag in first} <= {tag.id for tag in second}
        assert len(await tag_repo.find_all()) == 3

    @pytest.mark.asyncio
    async def test_username_unique(self, integration_env):
        user_service = await integration_env.get(UserService)

        assert await user_service.create_user("ada", "secret") is not None
        assert await user_service.create_user("ada", "other") is None

    @pytest.mark.asyncio
    async def test_missing_post(self, integration_env):
        post_service = await integration_env.get(PostService)

        with pytest.raises(PostNotFoundError):
            await post_service.update_post(PostId(12345), {}, ["go"])

    @pytest.mark.asyncio
    async def test_concurrent_tag_resolution(self):
        """Overlapping names resolved in opposite order by two transactions."""
        container = build_test_container(unmock={"persistence"})
        try:
            first, second = await asyncio.gather(
                resolve_in_request(container, ["go", "rust", "zig"]),
                resolve_in_request(container, ["zig", "rust", "go"]),
            )
            async with container() as request_container:
                tag_repo = await request_container.get(TagRepository)
                tags = await tag_repo.find_all()
        finally:
            await container.close()

        assert {tag.name.root for tag in tags} == {"go", "rust", "zig"}
        assert len(tags) == 3
        assert {tag.id for tag in first} == {tag.id for tag in second}
