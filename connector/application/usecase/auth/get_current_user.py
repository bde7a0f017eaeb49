"""Get current user use case."""

from pydantic import BaseModel

from connector.domain.service import UserService
from connector.domain.value import UserId

from ..base import BaseUseCase
from .views import UserView


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: UserId  # From the verified token


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for loading the authenticated user's account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserView:
        """Load the caller's account.

        Raises:
            NotFoundError: If the account was deleted after the token was issued
        """
        user = await self.user_service.get_by_id(request.user_id)
        return UserView(
            id=str(user.id),
            name=user.name,
            email=user.email.root,
            avatar=user.avatar,
            created_at=user.created_at,
        )
