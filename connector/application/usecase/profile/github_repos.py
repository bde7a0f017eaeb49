"""GitHub repositories use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from connector.domain.error import NotFoundError
from connector.domain.service import GitHubService
from connector.domain.value import GitHubUsername

from ..base import BaseUseCase


class GetGitHubReposRequest(BaseModel):
    """GitHub repositories request."""

    username: str


class GetGitHubReposUseCase(BaseUseCase):
    """Use case for listing a developer's GitHub repositories.

    Repository documents are passed through as GitHub returns them.
    """

    def __init__(self, github_service: GitHubService) -> None:
        self.github_service = github_service

    async def execute(self, request: GetGitHubReposRequest) -> list[dict[str, Any]]:
        """Raises NotFoundError for malformed usernames or users GitHub does not know."""
        try:
            username = GitHubUsername(request.username)
        except ValueError:
            logfire.warn("Malformed GitHub username", username=request.username)
            raise NotFoundError("GitHub profile", request.username)
        return await self.github_service.list_repositories(username)
