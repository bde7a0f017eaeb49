"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from connector.config import AuthSettings


class TokenSubject(BaseModel):
    """Identity embedded in the token."""

    id: str


class TokenPayload(BaseModel):
    """JWT token payload."""

    user: TokenSubject
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


class UnauthenticatedError(JWTError):
    """No token was supplied with the request."""

    def __init__(self) -> None:
        super().__init__("No token supplied")


class InvalidTokenError(JWTError):
    """Token signature, expiry, or shape is invalid."""

    pass


def create_token(
    user_id: str, settings: AuthSettings, issued_at: datetime | None = None
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID embedded as the token subject
        settings: Authentication settings
        issued_at: Issue time (defaults to now, in UTC)

    Returns:
        Encoded JWT token
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(seconds=settings.jwt_expiry_seconds)

    payload = {
        "user": {"id": user_id},
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str | None, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify (None when the header is missing)
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        UnauthenticatedError: If no token was supplied
        InvalidTokenError: If token is invalid or expired
    """
    if not token:
        raise UnauthenticatedError()

    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise InvalidTokenError("Invalid token")

    try:
        return TokenPayload(**payload)
    except (TypeError, ValueError):
        raise InvalidTokenError("Token payload is malformed")
