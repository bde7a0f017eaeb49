"""Profile domain service."""

from uuid import uuid4

import logfire

from connector.domain.error import NotFoundError, ValidationFailedError
from connector.domain.model import Education, Experience, Profile, ProfileUpdate
from connector.domain.repository import ProfileRepository
from connector.domain.value import EducationId, ExperienceId, Handle, ProfileId, UserId

from .base import Service


def parse_skills(raw: str) -> list[str]:
    """Split a comma-separated skills string.

    Entries are trimmed and empties dropped; order is preserved.

    Raises:
        ValidationFailedError: If no skill remains
    """
    skills = [skill.strip() for skill in raw.split(",")]
    skills = [skill for skill in skills if skill]
    if not skills:
        raise ValidationFailedError.for_field("skills", "Skills is required")
    return skills


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_user(self, user_id: UserId) -> Profile:
        """Get the profile owned by a user.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span("profile_service.get_by_user", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user(user_id)
            if not profile:
                logfire.info("No profile for user", user_id=str(user_id))
                raise NotFoundError("Profile", str(user_id))
            return profile

    async def get_by_handle(self, handle: Handle) -> Profile:
        """Get a profile by handle.

        Raises:
            NotFoundError: If no profile has the handle
        """
        with logfire.span("profile_service.get_by_handle", handle=handle.root):
            profile = await self.profile_repository.find_by_handle(handle)
            if not profile:
                logfire.info("No profile for handle", handle=handle.root)
                raise NotFoundError("Profile", handle.root)
            return profile

    async def list_profiles(self) -> list[Profile]:
        """List every profile."""
        with logfire.span("profile_service.list_profiles"):
            profiles = await self.profile_repository.find_all()
            logfire.info("Profiles listed", count=len(profiles))
            return profiles

    async def upsert(self, user_id: UserId, update: ProfileUpdate) -> Profile:
        """Create the user's profile or merge into the existing one.

        Args:
            user_id: Owner's user ID
            update: Fields to set; unset fields keep their stored value

        Returns:
            Saved profile
        """
        with logfire.span("profile_service.upsert", user_id=str(user_id)):
            existing = await self.profile_repository.find_by_user(user_id)
            if existing:
                profile = update.apply_to(existing)
                logfire.info("Profile updated", profile_id=str(profile.id))
            else:
                profile = update.create_profile(ProfileId(uuid4()), user_id)
                logfire.info("Profile created", profile_id=str(profile.id))
            return await self.profile_repository.save(profile)

    async def add_experience(self, user_id: UserId, experience: Experience) -> Profile:
        """Insert an experience entry at the head of the list.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span("profile_service.add_experience", user_id=str(user_id)):
            profile = await self.get_by_user(user_id)
            profile = profile.evolve(experience=[experience, *profile.experience])
            logfire.info(
                "Experience added",
                profile_id=str(profile.id),
                experience_id=str(experience.id),
            )
            return await self.profile_repository.save(profile)

    async def remove_experience(
        self, user_id: UserId, experience_id: ExperienceId
    ) -> Profile:
        """Remove an experience entry by ID.

        An unknown ID leaves the profile unchanged.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span(
            "profile_service.remove_experience",
            user_id=str(user_id),
            experience_id=str(experience_id),
        ):
            profile = await self.get_by_user(user_id)
            remaining = [e for e in profile.experience if e.id != experience_id]
            if len(remaining) == len(profile.experience):
                logfire.info("Experience not found", experience_id=str(experience_id))
                return profile
            profile = profile.evolve(experience=remaining)
            return await self.profile_repository.save(profile)

    async def add_education(self, user_id: UserId, education: Education) -> Profile:
        """Insert an education entry at the head of the list.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span("profile_service.add_education", user_id=str(user_id)):
            profile = await self.get_by_user(user_id)
            profile = profile.evolve(education=[education, *profile.education])
            logfire.info(
                "Education added",
                profile_id=str(profile.id),
                education_id=str(education.id),
            )
            return await self.profile_repository.save(profile)

    async def remove_education(
        self, user_id: UserId, education_id: EducationId
    ) -> Profile:
        """Remove an education entry by ID.

        An unknown ID leaves the profile unchanged.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span(
            "profile_service.remove_education",
            user_id=str(user_id),
            education_id=str(education_id),
        ):
            profile = await self.get_by_user(user_id)
            remaining = [e for e in profile.education if e.id != education_id]
            if len(remaining) == len(profile.education):
                logfire.info("Education not found", education_id=str(education_id))
                return profile
            profile = profile.evolve(education=remaining)
            return await self.profile_repository.save(profile)

    async def delete(self, user_id: UserId) -> bool:
        """Delete the user's profile, if any."""
        with logfire.span("profile_service.delete", user_id=str(user_id)):
            deleted = await self.profile_repository.delete_by_user(user_id)
            logfire.info("Profile deleted", user_id=str(user_id), deleted=deleted)
            return deleted
