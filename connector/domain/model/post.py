"""Post aggregate root.

Posts embed their likes and comments as ordered lists, newest first.
Author name and avatar are snapshots taken when the post or comment is
written and are never re-synced.
"""

from datetime import datetime
from uuid import uuid4

from pydantic import Field

from connector.domain.model.common import DomainModel
from connector.domain.value import CommentId, LikeId, PostId, UserId


class Like(DomainModel):
    """A user's like on a post."""

    id: LikeId = Field(default_factory=lambda: LikeId(uuid4()))
    user_id: UserId


class Comment(DomainModel):
    """Comment embedded in a post."""

    id: CommentId = Field(default_factory=lambda: CommentId(uuid4()))
    user_id: UserId
    text: str = Field(min_length=1)
    name: str
    avatar: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    user_id: UserId
    text: str = Field(min_length=1)
    name: str
    avatar: str | None = None
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    def is_liked_by(self, user_id: UserId) -> bool:
        """Whether the user already likes this post."""
        return any(like.user_id == user_id for like in self.likes)

    def find_comment(self, comment_id: CommentId) -> Comment | None:
        """Find an embedded comment by ID."""
        return next((c for c in self.comments if c.id == comment_id), None)
