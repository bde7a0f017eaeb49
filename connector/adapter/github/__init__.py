"""GitHub REST API adapter."""

from .client import GitHubAPIClient, MockGitHubClient, RealGitHubClient

__all__ = ["GitHubAPIClient", "RealGitHubClient", "MockGitHubClient"]
