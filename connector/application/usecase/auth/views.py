"""Response models shared by auth use cases."""

from datetime import datetime

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """Signed session token."""

    token: str


class UserView(BaseModel):
    """Account as shown to its owner, without the password hash."""

    id: str
    name: str
    email: str
    avatar: str | None
    created_at: datetime = Field(serialization_alias="date")
