"""Unit tests for LoginUseCase."""

import pytest

from juicebox.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from juicebox.domain.error import IncorrectCredentialsError, UserNotFoundError
from juicebox.domain.service import JWTService, UserService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_token_for_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        user = await user_service.create_user("ada", "secret")
        use_case = await unit_env.get(LoginUseCase)

        response = await use_case.execute(
            LoginRequest(username="ada", password="secret")
        )

        assert response.message
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == user.id
        assert payload.username == "ada"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.create_user("ada", "secret")
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(IncorrectCredentialsError):
            await use_case.execute(LoginRequest(username="ada", password="nope"))


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_token_to_public_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        login = await unit_env.get(LoginUseCase)
        await user_service.create_user("ada", "secret", "Ada")
        token = (await login.execute(LoginRequest(username="ada", password="secret"))).token
        use_case = await unit_env.get(GetCurrentUserUseCase)

        user = await use_case.execute(GetCurrentUserRequest(token=token))

        assert user.username.root == "ada"
        assert user.name == "Ada"
        assert "password" not in user.model_dump()

    @pytest.mark.asyncio
    async def test_deactivated_user_token_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        login = await unit_env.get(LoginUseCase)
        user = await user_service.create_user("ada", "secret")
        token = (await login.execute(LoginRequest(username="ada", password="secret"))).token
        await user_service.update_user(user.id, {"active": False})
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(UserNotFoundError):
            await use_case.execute(GetCurrentUserRequest(token=token))
