"""Auth use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .register import RegisterRequest, RegisterUseCase
from .views import TokenResponse, UserView

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "TokenResponse",
    "UserView",
]
