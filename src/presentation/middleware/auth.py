"""Bearer token authentication dependency."""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.application.services import AuthService
from src.core.dependencies import get_auth_service
from src.domain.entities import CustomerPrincipal
from src.domain.exceptions import UnauthorizedException

bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> str:
    """Extract the raw token from the Authorization header."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException()
    return credentials.credentials


async def get_current_customer(
    token: Annotated[str, Depends(get_bearer_token)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> CustomerPrincipal:
    """Resolve the calling customer from their access token."""
    return await auth_service.authenticate(token)


CurrentCustomer = Annotated[CustomerPrincipal, Depends(get_current_customer)]
