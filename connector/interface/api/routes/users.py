"""User registration routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from connector.application.usecase.auth import (
    RegisterRequest,
    RegisterUseCase,
    TokenResponse,
)
from connector.domain.error import DuplicateUserError
from connector.interface.api.validation import required_text, valid_email
from connector.interface.error import field_errors, server_error

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)

MIN_PASSWORD_LENGTH = 8


class RegisterAPIRequest(BaseModel):
    """API request for registering an account."""

    name: str | None = Field(default=None, validate_default=True)
    email: str | None = Field(default=None, validate_default=True)
    password: str | None = Field(default=None, validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return required_text(v, "Name is required")

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        return valid_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v):
        if not isinstance(v, str) or len(v) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                "password_length",
                "Please enter a password with 8 or more characters",
            )
        return v


@router.post("", response_model=TokenResponse)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> TokenResponse:
    """Register a new account and return a session token.

    Raises:
        HTTPException: 400 if the email is taken
    """
    try:
        return await register_use_case.execute(
            RegisterRequest(
                name=request.name, email=request.email, password=request.password
            )
        )
    except DuplicateUserError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=field_errors({"msg": "User already exists"}),
        )
    except Exception as e:
        logfire.error("Unexpected error during registration", error=str(e))
        raise server_error()
