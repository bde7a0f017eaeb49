"""Authentication gate for private routes.

Private routes depend on `CurrentUser`, which reads the `x-auth-token`
header and resolves the caller's user ID. The dependency runs before the
request body is validated, so a request without a valid token is rejected
with 401 whatever its body.
"""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Depends, Header, status

from connector.domain.service import JWTService
from connector.domain.value import UserId
from connector.interface.error import http_error
from connector.util.jwt import InvalidTokenError, UnauthenticatedError

TOKEN_HEADER = "x-auth-token"


@inject
async def get_current_user_id(
    jwt_service: FromDishka[JWTService],
    x_auth_token: Annotated[str | None, Header(alias=TOKEN_HEADER)] = None,
) -> UserId:
    """Resolve the caller from the token header.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    try:
        return jwt_service.authenticate(x_auth_token)
    except UnauthenticatedError:
        raise http_error(
            status.HTTP_401_UNAUTHORIZED, "No token, authorisation failed!"
        )
    except InvalidTokenError as e:
        logfire.info("Rejected token", reason=str(e))
        raise http_error(status.HTTP_401_UNAUTHORIZED, "Token is invalid")


CurrentUser = Annotated[UserId, Depends(get_current_user_id)]
