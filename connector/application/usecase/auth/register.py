"""Register use case."""

from pydantic import BaseModel

from connector.domain.service import JWTService, UserService
from connector.domain.value import Email

from ..base import BaseUseCase
from .views import TokenResponse


class RegisterRequest(BaseModel):
    """Register request."""

    name: str
    email: str
    password: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing the caller in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> TokenResponse:
        """Execute registration flow.

        Raises:
            DuplicateUserError: If the email already has an account
        """
        user = await self.user_service.register(
            name=request.name.strip(),
            email=Email(request.email),
            password=request.password,
        )
        return TokenResponse(token=self.jwt_service.create_token(user.id))
