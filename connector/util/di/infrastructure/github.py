"""GitHub infrastructure providers."""

from dishka import Scope, provide

from connector.adapter.github import RealGitHubClient
from connector.config import GitHubSettings
from connector.domain.service import GitHubClient
from connector.util.di.base import ProviderBase
from connector.util.observability import instrument_httpx


class GitHubProvider(ProviderBase):
    """GitHub component base."""

    __mock_component__ = "github"


class ProdGitHubProvider(GitHubProvider):
    """Production GitHub provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_github_client(self, github_settings: GitHubSettings) -> GitHubClient:
        """Provide GitHub REST client.

        Requests are anonymous unless both client credentials are configured.
        """
        instrument_httpx()
        return RealGitHubClient(
            api_url=github_settings.api_url,
            user_agent=github_settings.user_agent,
            repo_limit=github_settings.repo_limit,
            client_id=github_settings.client_id,
            client_secret=github_settings.client_secret,
            timeout=github_settings.timeout,
        )
