"""JWT token domain service."""

import logfire

from connector.config import AuthSettings
from connector.domain.value import UserId, parse_id
from connector.util.jwt import (
    InvalidTokenError,
    TokenPayload,
    UnauthenticatedError,
    create_token,
    verify_token,
)

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(str(user_id), self.auth_settings)
            logfire.info("JWT token created", user_id=str(user_id))
            return token

    def verify_token(self, token: str | None) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string, None when the header was absent

        Returns:
            Token payload

        Raises:
            UnauthenticatedError: If no token was supplied
            InvalidTokenError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except UnauthenticatedError:
                logfire.warn("Request without token")
                raise
            except InvalidTokenError as e:
                logfire.warn("JWT token verification failed", reason=str(e))
                raise
            logfire.info("JWT token verified", user_id=payload.user.id)
            return payload

    def authenticate(self, token: str | None) -> UserId:
        """Resolve the caller's user ID from a token.

        Raises:
            UnauthenticatedError: If no token was supplied
            InvalidTokenError: If the token is invalid or its subject is not a user ID
        """
        payload = self.verify_token(token)
        try:
            return UserId(parse_id(payload.user.id))
        except ValueError:
            logfire.warn("JWT subject is not a user ID", subject=payload.user.id)
            raise InvalidTokenError("Token subject is malformed")
