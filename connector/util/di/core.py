"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from connector.config import AuthSettings, GitHubSettings, Settings
from connector.util.di.base import ProviderBase
from connector.util.error import ConfigurationError

DEFAULT_JWT_SECRET = AuthSettings.model_fields["jwt_secret"].default


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings.

        Raises:
            ConfigurationError: If production runs with the placeholder secret
        """
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_github_settings(self, settings: Settings) -> GitHubSettings:
        """Provide GitHub settings."""
        return settings.github
