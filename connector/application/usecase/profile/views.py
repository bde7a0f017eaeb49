"""Response models shared by profile use cases."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from connector.domain.model import Education, Experience, Profile, User
from connector.domain.service import UserService


class ProfileOwnerView(BaseModel):
    """Owner fields embedded in a profile."""

    id: str
    name: str
    avatar: str | None


class SocialView(BaseModel):
    """Social links of a profile."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ExperienceView(BaseModel):
    """Experience entry."""

    id: str
    title: str
    company: str
    location: str | None
    from_date: date = Field(serialization_alias="from")
    to_date: date | None = Field(serialization_alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_domain(cls, experience: Experience) -> "ExperienceView":
        return cls(id=str(experience.id), **experience.model_dump(exclude={"id"}))


class EducationView(BaseModel):
    """Education entry."""

    id: str
    school: str
    course: str | None
    field_of_study: str = Field(serialization_alias="fieldOfStudy")
    from_date: date = Field(serialization_alias="from")
    to_date: date | None = Field(serialization_alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_domain(cls, education: Education) -> "EducationView":
        return cls(id=str(education.id), **education.model_dump(exclude={"id"}))


class ProfileView(BaseModel):
    """Profile with its owner's name and avatar."""

    id: str
    user: ProfileOwnerView | None
    handle: str | None
    company: str | None
    website: str | None
    location: str | None
    bio: str | None
    status: str
    github_username: str | None = Field(serialization_alias="githubusername")
    skills: list[str]
    social: SocialView
    experience: list[ExperienceView]
    education: list[EducationView]
    created_at: datetime = Field(serialization_alias="date")

    @classmethod
    def from_domain(cls, profile: Profile, owner: User | None) -> "ProfileView":
        """Build the view. `owner` is None when the account no longer exists."""
        return cls(
            id=str(profile.id),
            user=(
                ProfileOwnerView(id=str(owner.id), name=owner.name, avatar=owner.avatar)
                if owner
                else None
            ),
            handle=profile.handle.root if profile.handle else None,
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            status=profile.status,
            github_username=profile.github_username,
            skills=profile.skills,
            social=SocialView(**profile.social.model_dump()),
            experience=[ExperienceView.from_domain(e) for e in profile.experience],
            education=[EducationView.from_domain(e) for e in profile.education],
            created_at=profile.created_at,
        )


async def render_profile(profile: Profile, user_service: UserService) -> ProfileView:
    """Render a single profile with its owner populated."""
    return (await render_profiles([profile], user_service))[0]


async def render_profiles(
    profiles: list[Profile], user_service: UserService
) -> list[ProfileView]:
    """Render profiles, loading all owners in one query."""
    owners = await user_service.get_by_ids([p.user_id for p in profiles])
    return [ProfileView.from_domain(p, owners.get(p.user_id)) for p in profiles]
