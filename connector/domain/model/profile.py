"""Profile aggregate.

A profile is a single document per user holding their developer CV:
status, skills, social links, and ordered experience/education lists.
"""

from datetime import date, datetime
from uuid import uuid4

from pydantic import Field

from connector.domain.model.common import DomainModel
from connector.domain.value import (
    EducationId,
    ExperienceId,
    Handle,
    ProfileId,
    UserId,
)
from connector.domain.value.common import ValueObject


class SocialLinks(ValueObject):
    """Named links to the owner's social accounts."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class Experience(DomainModel):
    """Job entry in a profile's experience list."""

    id: ExperienceId = Field(default_factory=lambda: ExperienceId(uuid4()))
    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str | None = None
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class Education(DomainModel):
    """School entry in a profile's education list."""

    id: EducationId = Field(default_factory=lambda: EducationId(uuid4()))
    school: str = Field(min_length=1)
    course: str | None = None
    field_of_study: str = Field(min_length=1)
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class Profile(DomainModel):
    """Profile aggregate root, one per user.

    Experience and education are ordered newest-first: new entries are
    inserted at the head.
    """

    id: ProfileId
    user_id: UserId
    handle: Handle | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str = Field(min_length=1)
    github_username: str | None = None
    skills: list[str] = Field(default_factory=list)
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)


class ProfileUpdate(ValueObject):
    """Partial update of a profile.

    Every field is optional; `None` means "leave the stored value alone".
    `social`, when given, replaces the stored links as a whole.
    """

    handle: Handle | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    github_username: str | None = None
    skills: list[str] | None = None
    social: SocialLinks | None = None

    def changes(self) -> dict:
        """Fields to merge, keyed by profile attribute name."""
        changes = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if getattr(self, name) is not None
        }
        if "handle" in changes:
            changes["handle"] = changes["handle"].root
        if "social" in changes:
            changes["social"] = changes["social"].model_dump(exclude_none=True)
        return changes

    def apply_to(self, profile: Profile) -> Profile:
        """Merge this update key-by-key into an existing profile."""
        return profile.evolve(**self.changes())

    def create_profile(self, profile_id: ProfileId, user_id: UserId) -> Profile:
        """Build a new profile from this update."""
        return Profile.model_validate(
            {"id": profile_id, "user_id": user_id, **self.changes()}
        )
