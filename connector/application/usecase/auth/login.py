"""Login use case."""

from pydantic import BaseModel

from connector.domain.service import JWTService, UserService
from connector.domain.value import Email

from ..base import BaseUseCase
from .views import TokenResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging credentials for a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the email or password is wrong
        """
        user = await self.user_service.authenticate(
            Email(request.email), request.password
        )
        return TokenResponse(token=self.jwt_service.create_token(user.id))
