"""
FastAPI dependency injection providers.

The password hasher and JWT handler are built once at startup (see
main.create_app) and kept on app.state; these providers hand them out.
"""
from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..application.interfaces.unit_of_work import UnitOfWork
from ..application.services.auth_service import AuthService
from ..application.services.user_service import UserService
from ..domain.entities.user import IdentityClaim
from ..domain.exceptions import TokenVerificationException
from ..infrastructure.database.connection import get_unit_of_work as create_unit_of_work
from ..infrastructure.security import BcryptPasswordHasher, JWTHandler

# Security scheme; missing credentials are handled below so they map to 401
bearer_scheme = HTTPBearer(auto_error=False)


def get_password_hasher(request: Request) -> BcryptPasswordHasher:
    """Get password hasher instance."""
    return request.app.state.password_hasher


def get_jwt_handler(request: Request) -> JWTHandler:
    """Get JWT handler instance."""
    return request.app.state.jwt_handler


async def get_unit_of_work() -> AsyncGenerator[UnitOfWork, None]:
    """
    Provide Unit of Work for request lifecycle.

    Handles transaction management per request.
    """
    uow = create_unit_of_work()
    async with uow:
        yield uow


def get_auth_service(
    password_hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    jwt_handler: JWTHandler = Depends(get_jwt_handler),
) -> AuthService:
    """Get authentication service instance."""
    return AuthService(
        password_hasher=password_hasher,
        token_service=jwt_handler,
    )


def get_user_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> UserService:
    """Get user service instance."""
    return UserService(uow)


def get_current_claim(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> IdentityClaim:
    """
    Authenticate the request from its bearer token.

    Raises TokenVerificationException (401) when the header is missing
    or the token is rejected.
    """
    if credentials is None or not credentials.credentials:
        raise TokenVerificationException(TokenVerificationException.MALFORMED)

    return auth_service.authenticate(credentials.credentials)
