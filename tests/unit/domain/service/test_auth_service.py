"""Unit tests for AuthService and JWTService."""

import pytest

from juicebox.domain.error import IncorrectCredentialsError
from juicebox.domain.service import AuthService, JWTService, UserService
from juicebox.util.jwt import JWTError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_correct_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        auth_service = await unit_env.get(AuthService)
        created = await user_service.create_user("ada", "secret")

        user = await auth_service.authenticate("ada", "secret")

        assert user.id == created.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        auth_service = await unit_env.get(AuthService)
        await user_service.create_user("ada", "secret")

        with pytest.raises(IncorrectCredentialsError):
            await auth_service.authenticate("ada", "wrong")

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(IncorrectCredentialsError):
            await auth_service.authenticate("nobody", "secret")

    @pytest.mark.asyncio
    async def test_inactive_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        auth_service = await unit_env.get(AuthService)
        user = await user_service.create_user("ada", "secret")
        await user_service.update_user(user.id, {"active": False})

        with pytest.raises(IncorrectCredentialsError):
            await auth_service.authenticate("ada", "secret")


class TestJWTService:
    """Tests for JWTService."""

    @pytest.mark.asyncio
    async def test_token_round_trip(self, unit_env):
        jwt_service = await unit_env.get(JWTService)

        token = jwt_service.create_token(7, "ada")
        payload = jwt_service.verify_token(token)

        assert payload.user_id == 7
        assert payload.username == "ada"

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, unit_env):
        jwt_service = await unit_env.get(JWTService)

        with pytest.raises(JWTError):
            jwt_service.verify_token("not-a-token")

    @pytest.mark.asyncio
    async def test_get_user_id_from_token_is_lenient(self, unit_env):
        """Missing or invalid tokens mean anonymous, not an error."""
        jwt_service = await unit_env.get(JWTService)

        assert jwt_service.get_user_id_from_token(None) is None
        assert jwt_service.get_user_id_from_token("garbage") is None
        assert jwt_service.get_user_id_from_token(
            jwt_service.create_token(3, "bob")
        ) == 3
