"""
Pydantic schemas for user endpoints.
"""
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserSummaryResponse(BaseModel):
    """Public view of an account used by list and search."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str


class UserProfileUpdate(BaseModel):
    """
    Request to update a user profile.

    Only name and email are editable; any other field (including
    password) is rejected.
    """

    model_config = ConfigDict(extra='forbid')

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            cleaned = v.strip()
            if not cleaned:
                raise ValueError('Name cannot be empty')
            return cleaned
        return v


class UserEditResponse(BaseModel):
    """Account after an edit."""

    id: UUID
    name: str
    email: str
