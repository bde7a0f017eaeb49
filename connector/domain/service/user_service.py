"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from connector.config import AuthSettings
from connector.domain.error import (
    DuplicateUserError,
    InvalidCredentialsError,
    NotFoundError,
)
from connector.domain.model import User
from connector.domain.repository import UserRepository
from connector.domain.value import Email, UserId
from connector.util.avatar import gravatar_url
from connector.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(self, name: str, email: Email, password: str) -> User:
        """Create a new account.

        Args:
            name: Display name
            email: Email address (already normalized)
            password: Plain-text password

        Returns:
            Created user

        Raises:
            DuplicateUserError: If the email already has an account
        """
        with logfire.span("user_service.register", email=email.root):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.warn("Registration with existing email", email=email.root)
                raise DuplicateUserError(email.root)

            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                password_hash=hash_password(password, self.auth_settings.bcrypt_rounds),
                avatar=gravatar_url(email.root),
                created_at=datetime.now(),
            )

            # Unique index on email catches concurrent registrations
            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Duplicate registration race", email=email.root)
                raise DuplicateUserError(email.root)

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check an email and password pair.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Login with unknown email", email=email.root)
                raise InvalidCredentialsError()

            if not verify_password(password, user.password_hash):
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Get several users keyed by ID. Unknown IDs are left out."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: user for user in users}

    async def delete(self, user_id: UserId) -> bool:
        """Delete an account.

        Returns:
            True if the account existed
        """
        with logfire.span("user_service.delete", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id), deleted=deleted)
            return deleted
