"""Domain model entities for Dev Connector."""

from connector.domain.model.post import Comment, Like, Post
from connector.domain.model.profile import (
    Education,
    Experience,
    Profile,
    ProfileUpdate,
    SocialLinks,
)
from connector.domain.model.user import User

__all__ = [
    "User",
    "Profile",
    "ProfileUpdate",
    "SocialLinks",
    "Experience",
    "Education",
    "Post",
    "Like",
    "Comment",
]
