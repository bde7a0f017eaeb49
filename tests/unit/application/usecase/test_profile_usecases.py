"""Unit tests for profile use cases."""

from datetime import date
from uuid import uuid4

import pytest

from connector.application.usecase.profile import (
    AddExperienceRequest,
    AddExperienceUseCase,
    DeleteAccountRequest,
    DeleteAccountUseCase,
    GetGitHubReposRequest,
    GetGitHubReposUseCase,
    GetProfileByHandleRequest,
    GetProfileByHandleUseCase,
    GetProfileByUserRequest,
    GetProfileByUserUseCase,
    ListProfilesUseCase,
    RemoveExperienceRequest,
    RemoveExperienceUseCase,
    UpsertProfileRequest,
    UpsertProfileUseCase,
)
from connector.domain.error import NotFoundError, ValidationFailedError
from connector.domain.service import UserService
from connector.domain.value import Email
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _make_user(env):
    user_service = await env.get(UserService)
    return await user_service.register("Ann", Email("ann@x.com"), "longenough")


async def _upsert(env, user, **fields):
    use_case = await env.get(UpsertProfileUseCase)
    request = UpsertProfileRequest(
        user_id=user.id, status="Developer", skills="go, rust", **fields
    )
    return await use_case.execute(request)


class TestUpsertProfile:
    @pytest.mark.asyncio
    async def test_creates_profile_with_owner(self, unit_env):
        user = await _make_user(unit_env)

        view = await _upsert(unit_env, user, handle="ann", github_username="octocat")

        assert view.skills == ["go", "rust"]
        assert view.handle == "ann"
        assert view.user is not None
        assert view.user.name == "Ann"
        assert view.user.id == str(user.id)

    @pytest.mark.asyncio
    async def test_update_keeps_omitted_fields(self, unit_env):
        user = await _make_user(unit_env)
        await _upsert(unit_env, user, company="Acme", bio="Hi")

        view = await _upsert(unit_env, user, bio="Hello")

        assert view.company == "Acme"
        assert view.bio == "Hello"

    @pytest.mark.asyncio
    async def test_blank_skills_rejected(self, unit_env):
        user = await _make_user(unit_env)
        use_case = await unit_env.get(UpsertProfileUseCase)

        with pytest.raises(ValidationFailedError):
            await use_case.execute(
                UpsertProfileRequest(user_id=user.id, status="Developer", skills=" , ")
            )

    @pytest.mark.asyncio
    async def test_view_serializes_wire_names(self, unit_env):
        user = await _make_user(unit_env)
        await _upsert(unit_env, user, github_username="octocat")
        add_experience = await unit_env.get(AddExperienceUseCase)

        view = await add_experience.execute(
            AddExperienceRequest(
                user_id=user.id,
                title="Engineer",
                company="Acme",
                from_date=date(2020, 1, 1),
            )
        )
        data = view.model_dump(by_alias=True, mode="json")

        assert data["githubusername"] == "octocat"
        assert "date" in data
        assert data["experience"][0]["from"] == "2020-01-01"
        assert data["experience"][0]["to"] is None


class TestProfileLookups:
    @pytest.mark.asyncio
    async def test_malformed_user_id_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetProfileByUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetProfileByUserRequest(user_id="not-an-id"))

    @pytest.mark.asyncio
    async def test_lookup_by_user_id(self, unit_env):
        user = await _make_user(unit_env)
        await _upsert(unit_env, user)
        use_case = await unit_env.get(GetProfileByUserUseCase)

        view = await use_case.execute(GetProfileByUserRequest(user_id=str(user.id)))

        assert view.user.id == str(user.id)

    @pytest.mark.asyncio
    async def test_malformed_handle_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetProfileByHandleUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetProfileByHandleRequest(handle="no spaces allowed"))

    @pytest.mark.asyncio
    async def test_list_profiles(self, unit_env):
        user = await _make_user(unit_env)
        await _upsert(unit_env, user)
        use_case = await unit_env.get(ListProfilesUseCase)

        views = await use_case.execute()

        assert [v.user.name for v in views] == ["Ann"]


class TestRemoveExperience:
    @pytest.mark.asyncio
    async def test_malformed_id_leaves_profile_unchanged(self, unit_env):
        user = await _make_user(unit_env)
        await _upsert(unit_env, user)
        add_experience = await unit_env.get(AddExperienceUseCase)
        await add_experience.execute(
            AddExperienceRequest(
                user_id=user.id,
                title="Engineer",
                company="Acme",
                from_date=date(2020, 1, 1),
            )
        )
        use_case = await unit_env.get(RemoveExperienceUseCase)

        view = await use_case.execute(
            RemoveExperienceRequest(user_id=user.id, experience_id="garbage")
        )

        assert len(view.experience) == 1

    @pytest.mark.asyncio
    async def test_unknown_id_leaves_profile_unchanged(self, unit_env):
        user = await _make_user(unit_env)
        await _upsert(unit_env, user)
        use_case = await unit_env.get(RemoveExperienceUseCase)

        view = await use_case.execute(
            RemoveExperienceRequest(user_id=user.id, experience_id=str(uuid4()))
        )

        assert view.experience == []


class TestDeleteAccount:
    @pytest.mark.asyncio
    async def test_removes_profile_and_user(self, unit_env):
        user = await _make_user(unit_env)
        await _upsert(unit_env, user)
        use_case = await unit_env.get(DeleteAccountUseCase)

        response = await use_case.execute(DeleteAccountRequest(user_id=user.id))

        assert response.msg == "User deleted"
        user_service = await unit_env.get(UserService)
        with pytest.raises(NotFoundError):
            await user_service.get_by_id(user.id)
        lookup = await unit_env.get(GetProfileByUserUseCase)
        with pytest.raises(NotFoundError):
            await lookup.execute(GetProfileByUserRequest(user_id=str(user.id)))


class TestGitHubRepos:
    @pytest.mark.asyncio
    async def test_known_user(self, unit_env):
        use_case = await unit_env.get(GetGitHubReposUseCase)

        repos = await use_case.execute(GetGitHubReposRequest(username="octocat"))

        assert repos[0]["name"] == "Hello-World"

    @pytest.mark.asyncio
    async def test_path_like_username_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetGitHubReposUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetGitHubReposRequest(username="../orgs/acme"))
