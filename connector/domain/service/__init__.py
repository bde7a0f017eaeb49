"""Domain services."""

from .base import Service
from .github_service import GitHubClient, GitHubService
from .jwt_service import JWTService
from .post_service import PostService
from .profile_service import ProfileService, parse_skills
from .user_service import UserService

__all__ = [
    "GitHubClient",
    "GitHubService",
    "JWTService",
    "PostService",
    "ProfileService",
    "Service",
    "UserService",
    "parse_skills",
]
