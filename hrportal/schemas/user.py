"""
User schema models for validation.
"""
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

from hrportal.core.permissions import UserRole
from hrportal.models.user import UserStatus


class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None


class UserCreate(UserBase):
    """Schema for creating users."""
    password: str = Field(..., min_length=8)
    role: UserRole = UserRole.EMPLOYEE
    status: UserStatus = UserStatus.ACTIVE

    model_config = {
        "use_enum_values": True
    }


class UserResponse(UserBase):
    """Schema for user responses."""
    id: str = Field(..., alias="_id")
    role: str
    role_label: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "populate_by_name": True
    }


class NavigationItemResponse(BaseModel):
    label: str
    href: str
    icon: str
    active: bool = False


class SessionResponse(BaseModel):
    """The caller's identity plus what the shell should render for it."""
    user_id: str
    display_name: str
    role: UserRole
    role_label: str
    navigation: List[NavigationItemResponse]
