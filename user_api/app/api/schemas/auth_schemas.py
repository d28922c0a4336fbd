"""
Pydantic schemas for authentication endpoints.

Field names on the wire are camelCase (confirmPassword, accessToken, ...)
to match existing API clients.
"""
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class RegisterRequest(BaseModel):
    """User registration request."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., min_length=1, max_length=128, description="Password")
    confirm_password: str = Field(
        ...,
        alias="confirmPassword",
        description="Must equal password",
    )
    name: str = Field(..., min_length=1, max_length=100, description="Display name")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate and clean the name field."""
        cleaned = v.strip()
        if not cleaned:
            raise ValueError('Name cannot be empty')
        return cleaned


class LoginRequest(BaseModel):
    """
    User login request.

    Both fields are optional here so that a missing value gets the
    "Email and password required" answer from the service.
    """

    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")


class UserRecordResponse(BaseModel):
    """Stored account as returned after register/login."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    email: str
    name: str
    password: str = Field(..., description="Stored bcrypt credential, never the plaintext")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class AuthResponse(BaseModel):
    """Authentication response with user and tokens."""

    model_config = ConfigDict(populate_by_name=True)

    user: UserRecordResponse
    access_token: str = Field(..., alias="accessToken", description="JWT access token")
    refresh_token: str = Field(..., alias="refreshToken", description="JWT refresh token")


class AccessTokenResponse(BaseModel):
    """New access token issued from a refresh token."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken", description="JWT access token")


class ClaimResponse(BaseModel):
    """Identity carried by the presented token."""

    id: str
    name: str


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
    success: bool = True


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
