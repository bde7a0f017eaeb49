"""Helpers shared by post use cases."""

from connector.domain.error import NotFoundError
from connector.domain.value import CommentId, PostId, parse_id


def to_post_id(value: str) -> PostId:
    """Parse a post ID from a URL; malformed IDs count as not found."""
    try:
        return PostId(parse_id(value))
    except ValueError:
        raise NotFoundError("Post", value)


def to_comment_id(value: str) -> CommentId:
    """Parse a comment ID from a URL; malformed IDs count as not found."""
    try:
        return CommentId(parse_id(value))
    except ValueError:
        raise NotFoundError("Comment", value)
