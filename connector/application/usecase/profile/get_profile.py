"""Profile read use cases."""

from pydantic import BaseModel

from connector.domain.error import NotFoundError
from connector.domain.service import ProfileService, UserService
from connector.domain.value import Handle, UserId, parse_id

from ..base import BaseUseCase
from .views import ProfileView, render_profile, render_profiles


class GetMyProfileRequest(BaseModel):
    """Get the caller's own profile."""

    user_id: UserId


class GetMyProfileUseCase(BaseUseCase):
    """Use case for reading the authenticated user's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: GetMyProfileRequest) -> ProfileView:
        """Raises NotFoundError if the caller has no profile."""
        profile = await self.profile_service.get_by_user(request.user_id)
        return await render_profile(profile, self.user_service)


class ListProfilesUseCase(BaseUseCase):
    """Use case for listing every profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: None = None) -> list[ProfileView]:
        profiles = await self.profile_service.list_profiles()
        return await render_profiles(profiles, self.user_service)


class GetProfileByHandleRequest(BaseModel):
    """Look up a profile by handle."""

    handle: str


class GetProfileByHandleUseCase(BaseUseCase):
    """Use case for reading a profile by its public handle."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: GetProfileByHandleRequest) -> ProfileView:
        """Raises NotFoundError for unknown or malformed handles."""
        try:
            handle = Handle(request.handle)
        except ValueError:
            raise NotFoundError("Profile", request.handle)
        profile = await self.profile_service.get_by_handle(handle)
        return await render_profile(profile, self.user_service)


class GetProfileByUserRequest(BaseModel):
    """Look up a profile by owner ID, as supplied in the URL."""

    user_id: str


class GetProfileByUserUseCase(BaseUseCase):
    """Use case for reading a profile by its owner's ID."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: GetProfileByUserRequest) -> ProfileView:
        """Raises NotFoundError for unknown or malformed user IDs."""
        try:
            user_id = UserId(parse_id(request.user_id))
        except ValueError:
            raise NotFoundError("Profile", request.user_id)
        profile = await self.profile_service.get_by_user(user_id)
        return await render_profile(profile, self.user_service)
