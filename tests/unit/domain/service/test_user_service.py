"""Unit tests for UserService."""

import pytest

from juicebox.domain.error import UnknownFieldError, ValidationError
from juicebox.domain.model import PublicUser, User
from juicebox.domain.repository import UserRepository
from juicebox.domain.service import PostService, UserService
from juicebox.domain.value import UserId, Username
from juicebox.util.password import verify_password
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateUser:
    """Tests for create_user method."""

    @pytest.mark.asyncio
    async def test_create_user_returns_public_user(self, unit_env):
        """The created user should not carry the credential."""
        user_service = await unit_env.get(UserService)

        user = await user_service.create_user("ada", "secret", "Ada", "London")

        assert isinstance(user, PublicUser)
        assert user.username == Username("ada")
        assert user.name == "Ada"
        assert user.location == "London"
        assert user.active is True
        assert "password" not in user.model_dump()

    @pytest.mark.asyncio
    async def test_password_stored_hashed(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        user = await user_service.create_user("ada", "secret")
        stored = await user_repo.find_by_id(user.id)

        assert stored.password != "secret"
        assert verify_password("secret", stored.password)

    @pytest.mark.asyncio
    async def test_duplicate_username_returns_none(self, unit_env):
        """A taken username yields None and leaves the first user intact."""
        user_service = await unit_env.get(UserService)

        first = await user_service.create_user("ada", "secret", "Ada")
        second = await user_service.create_user("ada", "other", "Impostor")

        assert second is None
        stored = await user_service.get_user_by_username("ada")
        assert stored.id == first.id
        assert stored.name == "Ada"
        assert verify_password("secret", stored.password)

    @pytest.mark.asyncio
    async def test_password_over_72_bytes_rejected(self, unit_env):
        """bcrypt cannot hash it in full, so nothing is stored."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await user_service.create_user("ada", "x" * 73)
        with pytest.raises(ValidationError):
            await user_service.create_user("ada", "\u00e9" * 37)

        assert await user_service.get_user_by_username("ada") is None

    @pytest.mark.asyncio
    async def test_password_of_72_bytes_accepted(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        user = await user_service.create_user("ada", "x" * 72)

        stored = await user_repo.find_by_id(user.id)
        assert verify_password("x" * 72, stored.password)


class TestGetUser:
    """Tests for the user read methods."""

    @pytest.mark.asyncio
    async def test_get_user_by_id_embeds_posts(self, unit_env):
        user_service = await unit_env.get(UserService)
        post_service = await unit_env.get(PostService)
        user = await user_service.create_user("ada", "secret")
        await post_service.create_post(user.id, "Hello", "Body", ["go"])

        profile = await user_service.get_user_by_id(user.id)

        assert profile.username == Username("ada")
        assert [post.title for post in profile.posts] == ["Hello"]
        assert "password" not in profile.model_dump()

    @pytest.mark.asyncio
    async def test_get_user_by_id_missing(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_user_by_id(UserId(404)) is None

    @pytest.mark.asyncio
    async def test_get_public_user_has_no_credential(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("ada", "secret", "Ada")

        public = await user_service.get_public_user(user.id)

        assert isinstance(public, PublicUser)
        assert public.name == "Ada"
        assert "password" not in public.model_dump()
        assert "posts" not in public.model_dump()
        assert await user_service.get_public_user(UserId(404)) is None

    @pytest.mark.asyncio
    async def test_get_user_by_username_includes_hash(self, unit_env):
        """Only the authentication lookup returns the stored hash."""
        user_service = await unit_env.get(UserService)
        await user_service.create_user("ada", "secret")

        user = await user_service.get_user_by_username("ada")

        assert isinstance(user, User)
        assert user.password

    @pytest.mark.asyncio
    async def test_get_user_by_username_missing(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_user_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_get_all_users_without_credentials(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.create_user("ada", "secret")
        await user_service.create_user("bob", "secret")

        users = await user_service.get_all_users()

        assert [user.username.root for user in users] == ["ada", "bob"]
        assert all("password" not in user.model_dump() for user in users)


class TestUpdateUser:
    """Tests for update_user method."""

    @pytest.mark.asyncio
    async def test_partial_update(self, unit_env):
        """Only the given fields change."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("ada", "secret", "Ada", "London")

        updated = await user_service.update_user(user.id, {"location": "Paris"})

        assert updated.location == "Paris"
        assert updated.name == "Ada"
        assert "password" not in updated.model_dump()

    @pytest.mark.asyncio
    async def test_empty_update_returns_none(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("ada", "secret")

        assert await user_service.update_user(user.id, {}) is None

    @pytest.mark.asyncio
    async def test_password_update_is_hashed(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("ada", "secret")

        await user_service.update_user(user.id, {"password": "changed"})

        stored = await user_service.get_user_by_username("ada")
        assert stored.password != "changed"
        assert verify_password("changed", stored.password)
        assert not verify_password("secret", stored.password)

    @pytest.mark.asyncio
    async def test_unknown_field_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("ada", "secret")

        with pytest.raises(UnknownFieldError) as exc_info:
            await user_service.update_user(user.id, {"username": "eve"})

        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_update_missing_user_returns_none(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.update_user(UserId(404), {"name": "x"}) is None

    @pytest.mark.asyncio
    async def test_password_update_over_72_bytes_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("ada", "secret")

        with pytest.raises(ValidationError):
            await user_service.update_user(user.id, {"password": "x" * 100})

        stored = await user_service.get_user_by_username("ada")
        assert verify_password("secret", stored.password)
