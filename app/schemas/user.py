"""User schemas.

This module contains Pydantic models for user accounts, profile updates and
password changes.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from app.models.user import Role
from app.schemas.base import BaseSchema

# NOTE: email-validator is required by Pydantic for EmailStr validation


class UserSummary(BaseSchema):
    """Owner details embedded in admin listings."""

    id: str
    name: str
    email: str


class UserResponse(BaseSchema):
    """Schema for user API responses. Never carries the password hash."""

    id: str
    name: str
    email: str
    address: Optional[str] = None
    phone: Optional[str] = None
    image_url: Optional[str] = None
    role: Role
    created_at: datetime
    updated_at: Optional[datetime] = None


class UserListResponse(BaseSchema):
    users: List[UserResponse]


class UserCreate(BaseSchema):
    """Schema for an administrator creating an account."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: Role = Role.MEMBER


class ProfileUpdate(BaseSchema):
    """Schema for a member editing their own profile.

    Name and email are always required, the rest may be cleared.
    """

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    address: Optional[str] = None
    phone: Optional[str] = None
    image_url: Optional[str] = None


class UserUpdate(ProfileUpdate):
    """Schema for an administrator editing any account."""

    role: Optional[Role] = None


class PasswordChange(BaseSchema):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)


class PasswordReset(BaseSchema):
    new_password: str = Field(..., min_length=6)
