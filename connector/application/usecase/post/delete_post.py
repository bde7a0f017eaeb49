"""Delete post use case."""

from pydantic import BaseModel

from connector.domain.service import PostService
from connector.domain.value import UserId

from ..base import BaseUseCase
from .common import to_post_id
from .views import MessageResponse


class DeletePostRequest(BaseModel):
    """Delete post request."""

    user_id: UserId
    post_id: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting one of the caller's posts."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> MessageResponse:
        """Delete the post.

        Raises:
            NotFoundError: For unknown or malformed IDs
            NotAuthorizedError: If the caller is not the author
        """
        await self.post_service.delete_post(
            to_post_id(request.post_id), request.user_id
        )
        return MessageResponse(msg="Post removed")
