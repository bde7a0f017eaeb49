"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from connector.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    TokenResponse,
    UserView,
)
from connector.domain.error import InvalidCredentialsError, NotFoundError
from connector.interface.api.security import CurrentUser
from connector.interface.api.validation import valid_email
from connector.interface.error import field_errors, http_error, server_error

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str | None = Field(default=None, validate_default=True)
    password: str | None = Field(default=None, validate_default=True)

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        return valid_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v):
        if not isinstance(v, str):
            raise PydanticCustomError("required", "Password is required")
        return v


@router.get("", response_model=UserView)
async def get_me(
    user_id: CurrentUser,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> UserView:
    """Return the caller's account without the password hash."""
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=user_id)
        )
    except NotFoundError:
        logfire.warn("Token for deleted account", user_id=str(user_id))
        raise http_error(status.HTTP_404_NOT_FOUND, "User not found")
    except Exception as e:
        logfire.error("Unexpected error loading current user", error=str(e))
        raise server_error()


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> TokenResponse:
    """Exchange email and password for a session token.

    Unknown email and wrong password get the same response.
    """
    try:
        return await login_use_case.execute(
            LoginRequest(email=request.email, password=request.password)
        )
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=field_errors({"msg": "Credentials invalid"}),
        )
    except Exception as e:
        logfire.error("Unexpected error during login", error=str(e))
        raise server_error()
