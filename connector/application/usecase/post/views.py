"""Response models shared by post use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from connector.domain.model import Comment, Like, Post


class LikeView(BaseModel):
    """Like on a post."""

    id: str
    user: str

    @classmethod
    def from_domain(cls, like: Like) -> "LikeView":
        return cls(id=str(like.id), user=str(like.user_id))


class CommentView(BaseModel):
    """Comment on a post."""

    id: str
    user: str
    text: str
    name: str
    avatar: str | None
    created_at: datetime = Field(serialization_alias="date")

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            user=str(comment.user_id),
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            created_at=comment.created_at,
        )


class PostView(BaseModel):
    """Post with its embedded likes and comments."""

    id: str
    user: str
    text: str
    name: str
    avatar: str | None
    likes: list[LikeView]
    comments: list[CommentView]
    created_at: datetime = Field(serialization_alias="date")

    @classmethod
    def from_domain(cls, post: Post) -> "PostView":
        return cls(
            id=str(post.id),
            user=str(post.user_id),
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            likes=[LikeView.from_domain(like) for like in post.likes],
            comments=[CommentView.from_domain(c) for c in post.comments],
            created_at=post.created_at,
        )


class MessageResponse(BaseModel):
    """Confirmation message."""

    msg: str
