"""Unit tests for ProfileService."""

from datetime import date
from uuid import uuid4

import pytest

from connector.domain.error import NotFoundError, ValidationFailedError
from connector.domain.model import Education, Experience, ProfileUpdate, SocialLinks
from connector.domain.service import ProfileService, UserService, parse_skills
from connector.domain.value import Email, ExperienceId, Handle, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _make_user(env, email="ann@x.com"):
    user_service = await env.get(UserService)
    return await user_service.register("Ann", Email(email), "longenough")


def _experience(title="Engineer"):
    return Experience(title=title, company="Acme", from_date=date(2020, 1, 1))


class TestParseSkills:
    def test_splits_and_trims(self):
        assert parse_skills(" go, rust ,python") == ["go", "rust", "python"]

    def test_drops_empty_entries(self):
        assert parse_skills("go,,rust,") == ["go", "rust"]

    def test_only_separators_is_rejected(self):
        with pytest.raises(ValidationFailedError) as exc:
            parse_skills(" , ,")

        assert exc.value.errors[0]["msg"] == "Skills is required"


class TestUpsert:
    """Tests for upsert."""

    @pytest.mark.asyncio
    async def test_creates_profile_when_absent(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user = await _make_user(unit_env)

        profile = await profile_service.upsert(
            user.id,
            ProfileUpdate(status="Developer", skills=["go", "rust"]),
        )

        assert profile.user_id == user.id
        assert profile.status == "Developer"
        assert profile.skills == ["go", "rust"]
        assert (await profile_service.get_by_user(user.id)).id == profile.id

    @pytest.mark.asyncio
    async def test_merges_into_existing_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user = await _make_user(unit_env)
        first = await profile_service.upsert(
            user.id,
            ProfileUpdate(
                status="Developer",
                skills=["go"],
                company="Acme",
                social=SocialLinks(twitter="https://twitter.com/ann"),
            ),
        )

        second = await profile_service.upsert(
            user.id,
            ProfileUpdate(
                status="Senior Developer",
                skills=["rust"],
                social=SocialLinks(youtube="https://youtube.com/ann"),
            ),
        )

        assert second.id == first.id
        assert second.status == "Senior Developer"
        assert second.skills == ["rust"]
        assert second.company == "Acme"
        assert second.social.youtube == "https://youtube.com/ann"
        assert second.social.twitter is None
        assert len(await profile_service.list_profiles()) == 1

    @pytest.mark.asyncio
    async def test_lookup_by_handle(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user = await _make_user(unit_env)
        await profile_service.upsert(
            user.id,
            ProfileUpdate(handle=Handle("ann"), status="Developer", skills=["go"]),
        )

        profile = await profile_service.get_by_handle(Handle("ann"))

        assert profile.user_id == user.id
        with pytest.raises(NotFoundError):
            await profile_service.get_by_handle(Handle("bob"))


class TestExperienceAndEducation:
    @pytest.mark.asyncio
    async def test_new_experience_goes_first(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user = await _make_user(unit_env)
        await profile_service.upsert(
            user.id, ProfileUpdate(status="Developer", skills=["go"])
        )

        await profile_service.add_experience(user.id, _experience("Junior"))
        profile = await profile_service.add_experience(user.id, _experience("Senior"))

        assert [e.title for e in profile.experience] == ["Senior", "Junior"]

    @pytest.mark.asyncio
    async def test_remove_experience_by_id(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user = await _make_user(unit_env)
        await profile_service.upsert(
            user.id, ProfileUpdate(status="Developer", skills=["go"])
        )
        profile = await profile_service.add_experience(user.id, _experience())

        profile = await profile_service.remove_experience(
            user.id, profile.experience[0].id
        )

        assert profile.experience == []

    @pytest.mark.asyncio
    async def test_remove_unknown_experience_is_noop(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user = await _make_user(unit_env)
        await profile_service.upsert(
            user.id, ProfileUpdate(status="Developer", skills=["go"])
        )
        await profile_service.add_experience(user.id, _experience())

        profile = await profile_service.remove_experience(
            user.id, ExperienceId(uuid4())
        )

        assert len(profile.experience) == 1

    @pytest.mark.asyncio
    async def test_add_education(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user = await _make_user(unit_env)
        await profile_service.upsert(
            user.id, ProfileUpdate(status="Developer", skills=["go"])
        )

        profile = await profile_service.add_education(
            user.id,
            Education(
                school="MIT", field_of_study="CS", from_date=date(2015, 9, 1)
            ),
        )
        profile = await profile_service.remove_education(
            user.id, profile.education[0].id
        )

        assert profile.education == []

    @pytest.mark.asyncio
    async def test_add_experience_without_profile_fails(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.add_experience(UserId(uuid4()), _experience())


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user = await _make_user(unit_env)
        await profile_service.upsert(
            user.id, ProfileUpdate(status="Developer", skills=["go"])
        )

        assert await profile_service.delete(user.id) is True
        assert await profile_service.delete(user.id) is False
        with pytest.raises(NotFoundError):
            await profile_service.get_by_user(user.id)
