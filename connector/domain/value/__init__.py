"""Domain value objects for Dev Connector."""

from connector.domain.value.identifiers import (
    CommentId,
    EducationId,
    ExperienceId,
    LikeId,
    PostId,
    ProfileId,
    UserId,
    parse_id,
)
from connector.domain.value.types import Email, GitHubUsername, Handle

__all__ = [
    # Identifiers
    "UserId",
    "ProfileId",
    "ExperienceId",
    "EducationId",
    "PostId",
    "LikeId",
    "CommentId",
    "parse_id",
    # Types
    "Email",
    "Handle",
    "GitHubUsername",
]
