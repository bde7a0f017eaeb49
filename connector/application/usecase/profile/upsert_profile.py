"""Create-or-update profile use case."""

from pydantic import BaseModel

from connector.domain.model import ProfileUpdate, SocialLinks
from connector.domain.service import ProfileService, UserService, parse_skills
from connector.domain.value import UserId

from ..base import BaseUseCase
from .views import ProfileView, render_profile


class UpsertProfileRequest(BaseModel):
    """Upsert profile request.

    `skills` is the raw comma-separated string from the client.
    """

    user_id: UserId
    status: str
    skills: str
    handle: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class UpsertProfileUseCase(BaseUseCase):
    """Use case for creating or updating the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        """Initialize upsert profile use case.

        Args:
            profile_service: Profile domain service
            user_service: User domain service, for the owner view
        """
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: UpsertProfileRequest) -> ProfileView:
        """Merge the supplied fields into the caller's profile.

        Fields left out keep their stored value. The social block is
        replaced by whichever links were supplied.

        Raises:
            ValidationFailedError: If no skill remains after splitting
        """
        update = ProfileUpdate(
            handle=request.handle,
            company=request.company,
            website=request.website,
            location=request.location,
            bio=request.bio,
            status=request.status,
            github_username=request.github_username,
            skills=parse_skills(request.skills),
            social=SocialLinks(
                youtube=request.youtube,
                twitter=request.twitter,
                facebook=request.facebook,
                linkedin=request.linkedin,
                instagram=request.instagram,
            ),
        )
        profile = await self.profile_service.upsert(request.user_id, update)
        return await render_profile(profile, self.user_service)
