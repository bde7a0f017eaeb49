"""Mock GitHub providers for testing."""

from dishka import Scope, provide

from connector.adapter.github import MockGitHubClient
from connector.domain.service import GitHubClient
from connector.util.di.infrastructure.github import GitHubProvider


class MockGitHubProvider(GitHubProvider):
    """Mock GitHub provider returning canned repositories."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_github_client(self) -> GitHubClient:
        """Provide mock GitHub client."""
        return MockGitHubClient()
