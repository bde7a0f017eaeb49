"""Delete account use case."""

import logfire
from pydantic import BaseModel

from connector.domain.service import ProfileService, UserService
from connector.domain.value import UserId

from ..base import BaseUseCase


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    user_id: UserId


class DeleteAccountResponse(BaseModel):
    """Delete account response."""

    msg: str = "User deleted"


class DeleteAccountUseCase(BaseUseCase):
    """Use case for deleting the caller's profile and account.

    Posts written by the user are kept.
    """

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: DeleteAccountRequest) -> DeleteAccountResponse:
        with logfire.span("delete_account", user_id=str(request.user_id)):
            await self.profile_service.delete(request.user_id)
            await self.user_service.delete(request.user_id)
            return DeleteAccountResponse()
