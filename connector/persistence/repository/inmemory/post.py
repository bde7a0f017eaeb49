"""In-memory post repository for testing."""

from typing import List, Optional

from connector.domain.model.post import Post
from connector.domain.repository.post import PostRepository
from connector.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> List[Post]:
        """List posts newest first; later inserts win ties."""
        posts = list(reversed(self._posts.values()))
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
