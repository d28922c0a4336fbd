"""
Token API endpoints.
"""
from fastapi import APIRouter, Depends

from ..dependencies import get_auth_service, get_current_claim
from ..schemas.auth_schemas import AccessTokenResponse, ClaimResponse, ErrorResponse
from ...application.services.auth_service import AuthService
from ...domain.entities.user import IdentityClaim

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.get(
    "/refresh",
    response_model=AccessTokenResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid Token!"},
    },
)
async def refresh_token(
    claim: IdentityClaim = Depends(get_current_claim),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange a valid refresh token for a new access token.

    Send the refresh token as "Authorization: Bearer <token>".
    """
    return AccessTokenResponse(access_token=auth_service.refresh(claim))


@router.get(
    "/me",
    response_model=ClaimResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid Token!"},
    },
)
async def get_current_identity(
    claim: IdentityClaim = Depends(get_current_claim),
):
    """Return the identity carried by the presented token."""
    return ClaimResponse(id=claim.subject_id, name=claim.display_name)
