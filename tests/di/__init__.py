"""Mock providers for testing."""

from .github import MockGitHubProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGitHubProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
