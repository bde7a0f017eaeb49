"""Create post use case."""

from pydantic import BaseModel

from connector.domain.service import PostService, UserService
from connector.domain.value import UserId

from ..base import BaseUseCase
from .views import PostView


class CreatePostRequest(BaseModel):
    """Create post request."""

    user_id: UserId
    text: str


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service, for the author snapshot
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Create the post with the author's current name and avatar.

        Raises:
            NotFoundError: If the author's account no longer exists
        """
        author = await self.user_service.get_by_id(request.user_id)
        post = await self.post_service.create_post(author, request.text)
        return PostView.from_domain(post)
