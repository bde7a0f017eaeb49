"""Post read use cases."""

from pydantic import BaseModel

from connector.domain.service import PostService

from ..base import BaseUseCase
from .common import to_post_id
from .views import PostView


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: None = None) -> list[PostView]:
        posts = await self.post_service.list_posts()
        return [PostView.from_domain(post) for post in posts]


class GetPostRequest(BaseModel):
    """Get post request; the ID comes from the URL."""

    post_id: str


class GetPostUseCase(BaseUseCase):
    """Use case for reading a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Raises NotFoundError for unknown or malformed IDs."""
        post = await self.post_service.get_post(to_post_id(request.post_id))
        return PostView.from_domain(post)
