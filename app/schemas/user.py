"""
Pydantic schemas for user registration, login and profile responses.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, UUID4
from typing import Optional
from datetime import datetime

from app.models.user import UserRole


class UserRegisterRequest(BaseModel):
    """
    Request schema for user registration.

    Fields are optional so a half-filled form is reported as a single
    "Please fill full form!" error by the handler.
    """
    name: Optional[str] = Field(None, max_length=30)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    password: Optional[str] = Field(
        None,
        min_length=8,
        max_length=72,  # bcrypt limit
    )
    role: Optional[UserRole] = None


class UserLoginRequest(BaseModel):
    """Request schema for user login; the role must match the stored one."""
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None


class UserResponse(BaseModel):
    """User profile response (no password hash)."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID4
    name: str
    email: str
    phone: str
    role: UserRole
    created_at: Optional[datetime] = None


class CurrentUserResponse(BaseModel):
    success: bool = True
    user: UserResponse
