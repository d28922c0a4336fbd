"""
User account API endpoints.
"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import (
    get_auth_service,
    get_current_claim,
    get_unit_of_work,
    get_user_service,
)
from ..schemas.auth_schemas import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserRecordResponse,
)
from ..schemas.user_schemas import (
    UserEditResponse,
    UserProfileUpdate,
    UserSummaryResponse,
)
from ...application.interfaces.unit_of_work import UnitOfWork
from ...application.services.auth_service import (
    AuthResult,
    AuthService,
    LoginRequest as ServiceLoginRequest,
    RegisterRequest as ServiceRegisterRequest,
)
from ...application.services.user_service import UserService
from ...domain.entities.user import IdentityClaim, User

router = APIRouter(prefix="/users", tags=["Users"])


def _summary(user: User) -> UserSummaryResponse:
    return UserSummaryResponse(id=user.id, email=str(user.email), name=user.name)


def _auth_response(result: AuthResult) -> AuthResponse:
    user = result.user
    return AuthResponse(
        user=UserRecordResponse(
            id=user.id,
            email=str(user.email),
            name=user.name,
            password=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        ),
        access_token=result.access_token,
        refresh_token=result.refresh_token,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        409: {"model": ErrorResponse, "description": "Email already exists"},
        500: {"model": ErrorResponse, "description": "Account could not be created"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register a new user account.

    Returns the stored account together with an access token (15 minutes)
    and a refresh token (12 hours).
    """
    result = await auth_service.register(
        ServiceRegisterRequest(
            email=request.email,
            password=request.password,
            confirm_password=request.confirm_password,
            name=request.name,
        ),
        uow,
    )
    return _auth_response(result)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Email and password required"},
        403: {"model": ErrorResponse, "description": "Mismatch passwords"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Authenticate user and return access/refresh tokens."""
    result = await auth_service.login(
        ServiceLoginRequest(
            email=request.email or "",
            password=request.password or "",
        ),
        uow,
    )
    return _auth_response(result)


@router.get(
    "",
    response_model=List[UserSummaryResponse],
    responses={401: {"model": ErrorResponse}},
)
async def list_users(
    claim: IdentityClaim = Depends(get_current_claim),
    user_service: UserService = Depends(get_user_service),
):
    """List all users."""
    users = await user_service.list_users()
    return [_summary(u) for u in users]


@router.get(
    "/search",
    response_model=List[UserSummaryResponse],
    responses={401: {"model": ErrorResponse}},
)
async def search_users(
    id: Optional[UUID] = Query(None, description="User id"),
    email: Optional[str] = Query(None, description="Exact email address"),
    claim: IdentityClaim = Depends(get_current_claim),
    user_service: UserService = Depends(get_user_service),
):
    """Search users by id and/or email. Returns an empty list when nothing matches."""
    users = await user_service.search(id=id, email=email)
    return [_summary(u) for u in users]


@router.put(
    "/{user_id}/edit",
    response_model=UserEditResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def edit_user(
    user_id: UUID,
    request: UserProfileUpdate,
    claim: IdentityClaim = Depends(get_current_claim),
    user_service: UserService = Depends(get_user_service),
):
    """Update a user's name and/or email."""
    user = await user_service.edit(
        user_id,
        name=request.name,
        email=str(request.email) if request.email is not None else None,
    )
    return UserEditResponse(id=user.id, name=user.name, email=str(user.email))


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def delete_user(
    user_id: UUID,
    claim: IdentityClaim = Depends(get_current_claim),
    user_service: UserService = Depends(get_user_service),
):
    """Delete a user."""
    await user_service.delete(user_id)
    return MessageResponse(message=f"Deleted user with {user_id}", success=True)
