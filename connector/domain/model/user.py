"""User aggregate root.

Users register with name, email and password and authenticate with
the same email and password.
"""

from datetime import datetime

from pydantic import Field

from connector.domain.model.common import DomainModel
from connector.domain.value import Email, UserId


class User(DomainModel):
    """User account.

    The password is only ever held as a bcrypt hash. The avatar is a
    Gravatar URL derived from the email at registration.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Email
    password_hash: str
    avatar: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
