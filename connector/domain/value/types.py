"""Domain value objects for Dev Connector.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re

from pydantic import field_validator

from connector.domain.value.common import RootValueObject

GITHUB_USERNAME_PATTERN = r"[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}"


class Email(RootValueObject[str]):
    """Account email address, stored trimmed and lowercased.

    Syntax is checked at the API boundary; this only normalizes.
    """

    @field_validator("root")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Trim and lowercase the address."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Email must not be empty")
        return v


class Handle(RootValueObject[str]):
    """Public profile handle used in `/api/profile/handle/{handle}` URLs.

    1-40 characters: letters, digits, hyphens, underscores and dots.
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle format."""
        if not re.fullmatch(r"[A-Za-z0-9._-]{1,40}", v):
            raise ValueError(
                "Handle must be 1-40 characters of letters, digits, '.', '_' or '-'"
            )
        return v


class GitHubUsername(RootValueObject[str]):
    """GitHub login: up to 39 letters, digits or single inner hyphens."""

    @field_validator("root")
    @classmethod
    def validate_username_format(cls, v: str) -> str:
        """Validate username format."""
        if not re.fullmatch(GITHUB_USERNAME_PATTERN, v):
            raise ValueError("Not a valid GitHub username")
        return v
