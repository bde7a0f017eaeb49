"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from connector.domain.error import (
    AlreadyLikedError,
    NotAuthorizedError,
    NotFoundError,
    NotLikedError,
)
from connector.domain.model import Comment, Like, Post, User
from connector.domain.repository import PostRepository
from connector.domain.value import CommentId, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for posts, likes and comments."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, author: User, text: str) -> Post:
        """Create a post, snapshotting the author's name and avatar.

        Args:
            author: Posting user
            text: Post body

        Returns:
            Created post
        """
        with logfire.span("post_service.create_post", user_id=str(author.id)):
            post = Post(
                id=PostId(uuid4()),
                user_id=author.id,
                text=text,
                name=author.name,
                avatar=author.avatar,
                created_at=datetime.now(),
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def list_posts(self) -> list[Post]:
        """List all posts, newest first."""
        with logfire.span("post_service.list_posts"):
            return await self.post_repository.find_all()

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post. Only the author may delete it.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id)
            if post.user_id != user_id:
                logfire.warn(
                    "Post deletion by non-author",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id))
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def like(self, post_id: PostId, user_id: UserId) -> Post:
        """Like a post. New likes go to the head of the list.

        Raises:
            NotFoundError: If post not found
            AlreadyLikedError: If the user already likes the post
        """
        with logfire.span("post_service.like", post_id=str(post_id), user_id=str(user_id)):
            post = await self.get_post(post_id)
            if post.is_liked_by(user_id):
                logfire.warn("Duplicate like", post_id=str(post_id), user_id=str(user_id))
                raise AlreadyLikedError(str(post_id), str(user_id))
            post = post.evolve(likes=[Like(user_id=user_id), *post.likes])
            logfire.info("Post liked", post_id=str(post_id), user_id=str(user_id))
            return await self.post_repository.save(post)

    async def unlike(self, post_id: PostId, user_id: UserId) -> Post:
        """Remove the user's like from a post.

        Raises:
            NotFoundError: If post not found
            NotLikedError: If the user does not like the post
        """
        with logfire.span(
            "post_service.unlike", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id)
            if not post.is_liked_by(user_id):
                logfire.warn("Unlike without like", post_id=str(post_id), user_id=str(user_id))
                raise NotLikedError(str(post_id), str(user_id))
            post = post.evolve(likes=[like for like in post.likes if like.user_id != user_id])
            logfire.info("Post unliked", post_id=str(post_id), user_id=str(user_id))
            return await self.post_repository.save(post)

    async def add_comment(self, post_id: PostId, author: User, text: str) -> Post:
        """Add a comment at the head of the post's comment list.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span(
            "post_service.add_comment", post_id=str(post_id), user_id=str(author.id)
        ):
            post = await self.get_post(post_id)
            comment = Comment(
                id=CommentId(uuid4()),
                user_id=author.id,
                text=text,
                name=author.name,
                avatar=author.avatar,
                created_at=datetime.now(),
            )
            post = post.evolve(comments=[comment, *post.comments])
            logfire.info("Comment added", post_id=str(post_id), comment_id=str(comment.id))
            return await self.post_repository.save(post)

    async def remove_comment(
        self, post_id: PostId, comment_id: CommentId, user_id: UserId
    ) -> Post:
        """Remove a comment. Only the comment's author may remove it.

        Raises:
            NotFoundError: If the post or the comment is not found
            NotAuthorizedError: If the caller did not write the comment
        """
        with logfire.span(
            "post_service.remove_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            post = await self.get_post(post_id)
            comment = post.find_comment(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            if comment.user_id != user_id:
                logfire.warn(
                    "Comment deletion by non-author",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))
            post = post.evolve(comments=[c for c in post.comments if c.id != comment_id])
            logfire.info("Comment removed", post_id=str(post_id), comment_id=str(comment_id))
            return await self.post_repository.save(post)
