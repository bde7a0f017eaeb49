"""GitHub REST API client.

Lists a developer's public repositories for display on their profile.
"""

from typing import Any

import httpx
import logfire

from connector.adapter.error import ProviderError
from connector.domain.error import NotFoundError
from connector.domain.service import GitHubClient
from connector.domain.value import GitHubUsername


class GitHubAPIClient(GitHubClient):
    """Base class for GitHub clients.

    Real and mock implementations share this type so DI can swap them.
    """

    pass


class RealGitHubClient(GitHubAPIClient):
    """GitHub client calling the public REST API with httpx."""

    def __init__(
        self,
        api_url: str,
        user_agent: str,
        repo_limit: int = 5,
        client_id: str | None = None,
        client_secret: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize GitHub client.

        Args:
            api_url: GitHub API base URL
            user_agent: User-Agent header (GitHub rejects requests without one)
            repo_limit: Maximum number of repositories to return
            client_id: OAuth app client ID, raises the rate limit when set
            client_secret: OAuth app client secret
            timeout: Request timeout in seconds
            transport: httpx transport override
        """
        self.api_url = api_url.rstrip("/")
        self.user_agent = user_agent
        self.repo_limit = repo_limit
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout
        self.transport = transport

    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        """List a user's oldest public repositories.

        Raises:
            NotFoundError: If the username is malformed or GitHub answers
                with a non-2xx status
            ProviderError: If the request fails in transport
        """
        try:
            GitHubUsername(username)
        except ValueError:
            raise NotFoundError("GitHub profile", username)

        url = f"{self.api_url}/users/{username}/repos"
        params = {
            "per_page": str(self.repo_limit),
            "sort": "created",
            "direction": "asc",
        }
        auth = None
        if self.client_id and self.client_secret:
            auth = (self.client_id, self.client_secret)

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(
                    url,
                    params=params,
                    auth=auth,
                    headers={
                        "User-Agent": self.user_agent,
                        "Accept": "application/vnd.github+json",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("GitHub request HTTP error", username=username, error=str(e))
            raise ProviderError(f"HTTP error fetching GitHub repositories: {e}")

        if not response.is_success:
            logfire.warn(
                "GitHub repositories request failed",
                username=username,
                status_code=response.status_code,
            )
            raise NotFoundError("GitHub profile", username)

        try:
            return response.json()
        except ValueError as e:
            logfire.error("GitHub returned invalid JSON", username=username)
            raise ProviderError(f"Invalid JSON from GitHub: {e}")


class MockGitHubClient(GitHubAPIClient):
    """Mock GitHub client for testing.

    Returns canned repositories without making real API calls.
    """

    def __init__(self, repositories: dict[str, list[dict[str, Any]]] | None = None):
        """Initialize mock client.

        Args:
            repositories: Repositories keyed by username; defaults to one
                known user, "octocat"
        """
        if repositories is None:
            repositories = {
                "octocat": [
                    {
                        "id": 1296269,
                        "name": "Hello-World",
                        "full_name": "octocat/Hello-World",
                        "html_url": "https://github.com/octocat/Hello-World",
                        "description": "My first repository on GitHub!",
                        "stargazers_count": 80,
                        "watchers_count": 80,
                        "forks_count": 9,
                    }
                ]
            }
        self.repositories = repositories

    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        """Return canned repositories, or NotFoundError for unknown users."""
        if username not in self.repositories:
            raise NotFoundError("GitHub profile", username)
        return self.repositories[username]
