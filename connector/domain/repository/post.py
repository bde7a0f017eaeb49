"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from connector.domain.model.post import Post
from connector.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Likes and comments are part of the aggregate and are persisted with it.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """List every post, newest first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or replace).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Args:
            post_id: The post's unique identifier

        Returns:
            True if a post was deleted, False if none existed
        """
        pass
