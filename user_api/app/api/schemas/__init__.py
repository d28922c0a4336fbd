"""
Pydantic request/response schemas for API endpoints.
"""
# Auth schemas
from .auth_schemas import (
    AccessTokenResponse,
    AuthResponse,
    ClaimResponse,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserRecordResponse,
)

# User schemas
from .user_schemas import (
    UserEditResponse,
    UserProfileUpdate,
    UserSummaryResponse,
)

__all__ = [
    # Auth
    'AccessTokenResponse',
    'AuthResponse',
    'ClaimResponse',
    'ErrorResponse',
    'LoginRequest',
    'MessageResponse',
    'RegisterRequest',
    'UserRecordResponse',
    # User
    'UserEditResponse',
    'UserProfileUpdate',
    'UserSummaryResponse',
]
