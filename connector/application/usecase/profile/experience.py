"""Experience entry use cases."""

from datetime import date

from pydantic import BaseModel

from connector.domain.model import Experience
from connector.domain.service import ProfileService, UserService
from connector.domain.value import ExperienceId, UserId, parse_id

from ..base import BaseUseCase
from .views import ProfileView, render_profile


class AddExperienceRequest(BaseModel):
    """Add experience request."""

    user_id: UserId
    title: str
    company: str
    location: str | None = None
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class AddExperienceUseCase(BaseUseCase):
    """Use case for adding a job to the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: AddExperienceRequest) -> ProfileView:
        """Raises NotFoundError if the caller has no profile."""
        experience = Experience(
            title=request.title,
            company=request.company,
            location=request.location,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        profile = await self.profile_service.add_experience(
            request.user_id, experience
        )
        return await render_profile(profile, self.user_service)


class RemoveExperienceRequest(BaseModel):
    """Remove experience request; the ID comes from the URL."""

    user_id: UserId
    experience_id: str


class RemoveExperienceUseCase(BaseUseCase):
    """Use case for removing a job from the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: RemoveExperienceRequest) -> ProfileView:
        """Remove the entry; unknown or malformed IDs leave the profile as is.

        Raises:
            NotFoundError: If the caller has no profile
        """
        try:
            experience_id = ExperienceId(parse_id(request.experience_id))
        except ValueError:
            profile = await self.profile_service.get_by_user(request.user_id)
        else:
            profile = await self.profile_service.remove_experience(
                request.user_id, experience_id
            )
        return await render_profile(profile, self.user_service)
