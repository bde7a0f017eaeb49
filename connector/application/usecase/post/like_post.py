"""Like and unlike use cases."""

from pydantic import BaseModel

from connector.domain.service import PostService
from connector.domain.value import UserId

from ..base import BaseUseCase
from .common import to_post_id
from .views import LikeView


class LikeRequest(BaseModel):
    """Like or unlike request."""

    user_id: UserId
    post_id: str


class LikePostUseCase(BaseUseCase):
    """Use case for liking a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: LikeRequest) -> list[LikeView]:
        """Like the post and return its likes.

        Raises:
            NotFoundError: For unknown or malformed IDs
            AlreadyLikedError: If the caller already likes the post
        """
        post = await self.post_service.like(
            to_post_id(request.post_id), request.user_id
        )
        return [LikeView.from_domain(like) for like in post.likes]


class UnlikePostUseCase(BaseUseCase):
    """Use case for taking back a like."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: LikeRequest) -> list[LikeView]:
        """Remove the caller's like and return the remaining likes.

        Raises:
            NotFoundError: For unknown or malformed IDs
            NotLikedError: If the caller does not like the post
        """
        post = await self.post_service.unlike(
            to_post_id(request.post_id), request.user_id
        )
        return [LikeView.from_domain(like) for like in post.likes]
