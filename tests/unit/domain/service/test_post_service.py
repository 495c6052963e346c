"""Unit tests for PostService."""

import pytest

from juicebox.domain.error import PostNotFoundError, UnknownFieldError
from juicebox.domain.model import Post
from juicebox.domain.repository import PostRepository
from juicebox.domain.service import PostService, UserService
from juicebox.domain.value import PostId, UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _make_author(unit_env, username: str = "ada") -> UserId:
    user_service = await unit_env.get(UserService)
    user = await user_service.create_user(username, "secret", "Ada", "London")
    return user.id


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_with_tags(self, unit_env):
        """The returned aggregate should embed author and tags."""
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)

        post = await post_service.create_post(
            author_id, "Hello", "First post", ["go", "rust"]
        )

        assert isinstance(post, Post)
        assert post.title == "Hello"
        assert post.content == "First post"
        assert post.active is True
        assert post.tag_names == {"go", "rust"}
        assert post.author is not None
        assert post.author.id == author_id
        assert post.author.username == Username("ada")

    @pytest.mark.asyncio
    async def test_create_post_without_tags(self, unit_env):
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)

        post = await post_service.create_post(author_id, "Untagged", "Body")

        assert post.tags == []

    @pytest.mark.asyncio
    async def test_aggregate_has_no_author_id_or_password(self, unit_env):
        """The aggregate exposes the author summary only."""
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)

        post = await post_service.create_post(author_id, "Hello", "Body", ["go"])
        data = post.model_dump()

        assert "author_id" not in data
        assert "password" not in data["author"]

    @pytest.mark.asyncio
    async def test_read_after_write(self, unit_env):
        """A fresh read should match what create returned."""
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)

        created = await post_service.create_post(author_id, "Hello", "Body", ["go"])
        fetched = await post_service.get_post_by_id(created.id)

        assert fetched == created


class TestAssemble:
    """Tests for assemble method."""

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(PostNotFoundError) as exc_info:
            await post_service.assemble(PostId(999))

        assert exc_info.value.name == "PostNotFoundError"
        assert exc_info.value.message == "Could not find a post with that postId"

    @pytest.mark.asyncio
    async def test_missing_author_yields_none(self, unit_env):
        """A dangling author id is surfaced as author=None."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        record = await post_repo.insert(UserId(42), "Orphan", "Body")
        post = await post_service.assemble(record.id)

        assert post.author is None
        assert post.title == "Orphan"


class TestUpdatePost:
    """Tests for update_post method."""

    @pytest.mark.asyncio
    async def test_scalar_update_leaves_tags(self, unit_env):
        """Omitting tags should keep the current tag set."""
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)
        post = await post_service.create_post(author_id, "Old", "Body", ["go"])

        updated = await post_service.update_post(post.id, {"title": "New"})

        assert updated.title == "New"
        assert updated.content == "Body"
        assert updated.tag_names == {"go"}

    @pytest.mark.asyncio
    async def test_tag_set_replacement(self, unit_env):
        """The supplied tag names become the exact tag set."""
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)
        post = await post_service.create_post(author_id, "T", "C", ["a", "b"])

        updated = await post_service.update_post(post.id, {}, ["b", "c"])

        assert updated.tag_names == {"b", "c"}

    @pytest.mark.asyncio
    async def test_go_rust_scenario(self, unit_env):
        """Create with go and rust, keep go only, then drop every tag."""
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)

        post = await post_service.create_post(author_id, "Langs", "...", ["go", "rust"])
        assert post.tag_names == {"go", "rust"}

        post = await post_service.update_post(post.id, {}, ["go"])
        assert post.tag_names == {"go"}

        post = await post_service.update_post(post.id, {}, [])
        assert post.tags == []

        # rust still exists as a tag, it is just no longer linked
        tags = await post_service.tag_service.get_all_tags()
        assert {tag.name.root for tag in tags} == {"go", "rust"}

    @pytest.mark.asyncio
    async def test_reapplying_tags_is_idempotent(self, unit_env):
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)
        post = await post_service.create_post(author_id, "T", "C", ["go"])

        await post_service.update_post(post.id, {}, ["go"])
        updated = await post_service.update_post(post.id, {}, ["go"])

        assert [tag.name.root for tag in updated.tags] == ["go"]

    @pytest.mark.asyncio
    async def test_deactivate(self, unit_env):
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)
        post = await post_service.create_post(author_id, "T", "C")

        updated = await post_service.update_post(post.id, {"active": False})

        assert updated.active is False

    @pytest.mark.asyncio
    async def test_unknown_field_rejected_before_write(self, unit_env):
        """A field outside the allow-list should fail without writing."""
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)
        post = await post_service.create_post(author_id, "T", "C", ["go"])

        with pytest.raises(UnknownFieldError) as exc_info:
            await post_service.update_post(
                post.id, {"title": "Changed", "author_id": 7}, ["rust"]
            )

        assert exc_info.value.field == "author_id"
        unchanged = await post_service.get_post_by_id(post.id)
        assert unchanged.title == "T"
        assert unchanged.tag_names == {"go"}

    @pytest.mark.asyncio
    async def test_update_missing_post_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(PostNotFoundError):
            await post_service.update_post(PostId(404), {"title": "x"}, ["go"])

    @pytest.mark.asyncio
    async def test_update_missing_post_creates_no_links(self, unit_env):
        """Tags may be created but nothing links to a missing post."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        with pytest.raises(PostNotFoundError):
            await post_service.update_post(PostId(404), {}, ["go"])

        assert await post_repo.find_tags(PostId(404)) == []


class TestQueries:
    """Tests for the post listing methods."""

    @pytest.mark.asyncio
    async def test_get_posts_by_tag_name(self, unit_env):
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)
        go_post = await post_service.create_post(author_id, "Go", "...", ["go"])
        await post_service.create_post(author_id, "Rust", "...", ["rust"])
        both = await post_service.create_post(author_id, "Both", "...", ["go", "rust"])

        posts = await post_service.get_posts_by_tag_name("go")

        assert [post.id for post in posts] == [go_post.id, both.id]

    @pytest.mark.asyncio
    async def test_get_posts_by_unknown_tag_is_empty(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.get_posts_by_tag_name("nope") == []

    @pytest.mark.asyncio
    async def test_get_posts_by_user(self, unit_env):
        post_service = await unit_env.get(PostService)
        ada = await _make_author(unit_env, "ada")
        bob = await _make_author(unit_env, "bob")
        await post_service.create_post(ada, "A", "...")
        await post_service.create_post(bob, "B", "...")

        posts = await post_service.get_posts_by_user(bob)

        assert [post.title for post in posts] == ["B"]

    @pytest.mark.asyncio
    async def test_get_all_posts_includes_inactive(self, unit_env):
        """Visibility is applied by the use cases, not the service."""
        post_service = await unit_env.get(PostService)
        author_id = await _make_author(unit_env)
        post = await post_service.create_post(author_id, "A", "...")
        await post_service.update_post(post.id, {"active": False})

        posts = await post_service.get_all_posts()

        assert len(posts) == 1
        assert posts[0].active is False
