"""Education entry use cases."""

from datetime import date

from pydantic import BaseModel

from connector.domain.model import Education
from connector.domain.service import ProfileService, UserService
from connector.domain.value import EducationId, UserId, parse_id

from ..base import BaseUseCase
from .views import ProfileView, render_profile


class AddEducationRequest(BaseModel):
    """Add education request."""

    user_id: UserId
    school: str
    course: str | None = None
    field_of_study: str
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class AddEducationUseCase(BaseUseCase):
    """Use case for adding a school to the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: AddEducationRequest) -> ProfileView:
        """Raises NotFoundError if the caller has no profile."""
        education = Education(
            school=request.school,
            course=request.course,
            field_of_study=request.field_of_study,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        profile = await self.profile_service.add_education(request.user_id, education)
        return await render_profile(profile, self.user_service)


class RemoveEducationRequest(BaseModel):
    """Remove education request; the ID comes from the URL."""

    user_id: UserId
    education_id: str


class RemoveEducationUseCase(BaseUseCase):
    """Use case for removing a school from the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: RemoveEducationRequest) -> ProfileView:
        """Remove the entry; unknown or malformed IDs leave the profile as is.

        Raises:
            NotFoundError: If the caller has no profile
        """
        try:
            education_id = EducationId(parse_id(request.education_id))
        except ValueError:
            profile = await self.profile_service.get_by_user(request.user_id)
        else:
            profile = await self.profile_service.remove_education(
                request.user_id, education_id
            )
        return await render_profile(profile, self.user_service)
