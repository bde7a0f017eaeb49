"""GitHub repository lookup domain service."""

from typing import Any

import logfire

from connector.domain.value import GitHubUsername

from .base import Service


class GitHubClient:
    """GitHub API client interface."""

    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        """List a user's public repositories.

        Args:
            username: GitHub username, already validated

        Returns:
            Repository documents as returned by GitHub

        Raises:
            NotFoundError: If GitHub does not know the user
            ProviderError: If GitHub could not be reached
        """
        raise NotImplementedError


class GitHubService(Service):
    """Domain service for fetching a developer's public repositories."""

    def __init__(self, github_client: GitHubClient) -> None:
        self.github_client = github_client

    async def list_repositories(self, username: GitHubUsername) -> list[dict[str, Any]]:
        """List the latest public repositories for a GitHub user."""
        with logfire.span("github_service.list_repositories", username=username.root):
            repos = await self.github_client.list_repositories(username.root)
            logfire.info(
                "GitHub repositories fetched", username=username.root, count=len(repos)
            )
            return repos
