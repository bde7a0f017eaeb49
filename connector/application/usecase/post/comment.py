"""Comment use cases."""

from pydantic import BaseModel

from connector.domain.service import PostService, UserService
from connector.domain.value import UserId

from ..base import BaseUseCase
from .common import to_comment_id, to_post_id
from .views import CommentView


class AddCommentRequest(BaseModel):
    """Add comment request."""

    user_id: UserId
    post_id: str
    text: str


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> list[CommentView]:
        """Add the comment and return the post's comments.

        Raises:
            NotFoundError: For unknown or malformed post IDs
        """
        post_id = to_post_id(request.post_id)
        author = await self.user_service.get_by_id(request.user_id)
        post = await self.post_service.add_comment(post_id, author, request.text)
        return [CommentView.from_domain(c) for c in post.comments]


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    user_id: UserId
    post_id: str
    comment_id: str


class RemoveCommentUseCase(BaseUseCase):
    """Use case for deleting one of the caller's comments."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: RemoveCommentRequest) -> list[CommentView]:
        """Remove the comment and return the remaining comments.

        Raises:
            NotFoundError: For unknown post or comment
            NotAuthorizedError: If the caller did not write the comment
        """
        post = await self.post_service.remove_comment(
            to_post_id(request.post_id),
            to_comment_id(request.comment_id),
            request.user_id,
        )
        return [CommentView.from_domain(c) for c in post.comments]
