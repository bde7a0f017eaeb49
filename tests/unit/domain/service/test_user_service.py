"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from connector.domain.error import (
    DuplicateUserError,
    InvalidCredentialsError,
    NotFoundError,
)
from connector.domain.repository import UserRepository
from connector.domain.service import UserService
from connector.domain.value import Email, UserId
from connector.util.avatar import gravatar_url
from connector.util.password import verify_password
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_hashes_password_and_assigns_avatar(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        user = await user_service.register("Ann", Email("Ann@X.com"), "longenough")

        saved = await user_repo.find_by_id(user.id)
        assert saved is not None
        assert saved.email == Email("ann@x.com")
        assert saved.password_hash != "longenough"
        assert verify_password("longenough", saved.password_hash)
        assert saved.avatar == gravatar_url("ann@x.com")

    @pytest.mark.asyncio
    async def test_register_duplicate_email_fails(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register("Ann", Email("ann@x.com"), "longenough")

        with pytest.raises(DuplicateUserError):
            await user_service.register("Other Ann", Email(" ANN@x.com"), "password2")


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_correct_credentials_return_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        registered = await user_service.register(
            "Ann", Email("ann@x.com"), "longenough"
        )

        user = await user_service.authenticate(Email("ann@x.com"), "longenough")

        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_alike(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register("Ann", Email("ann@x.com"), "longenough")

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await user_service.authenticate(Email("ann@x.com"), "wrongpassword")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await user_service.authenticate(Email("bob@x.com"), "longenough")

        assert str(wrong_password.value) == str(unknown_email.value)


class TestGetAndDelete:
    @pytest.mark.asyncio
    async def test_get_unknown_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_removes_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.register("Ann", Email("ann@x.com"), "longenough")

        assert await user_service.delete(user.id) is True
        assert await user_service.delete(user.id) is False
        with pytest.raises(NotFoundError):
            await user_service.get_by_id(user.id)

    @pytest.mark.asyncio
    async def test_get_by_ids_skips_unknown(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.register("Ann", Email("ann@x.com"), "longenough")

        users = await user_service.get_by_ids([user.id, UserId(uuid4())])

        assert list(users) == [user.id]
