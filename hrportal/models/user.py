# hrportal/models/user.py
from datetime import datetime
from enum import Enum
from typing import Optional
from bson import ObjectId
from pydantic import BaseModel, EmailStr, Field

from hrportal.core.permissions import UserRole


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ONBOARDING = "onboarding"
    TERMINATED = "terminated"


class UserModel(BaseModel):
    """Database model for users"""
    id: str = Field(default_factory=lambda: str(ObjectId()), alias="_id")
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole = UserRole.EMPLOYEE
    status: UserStatus = UserStatus.ACTIVE
    department: Optional[str] = None
    position: Optional[str] = None
    manager_id: Optional[str] = None
    start_date: Optional[datetime] = None
    password: Optional[str] = None  # bcrypt hash
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True,
        "json_schema_extra": {
            "example": {
                "email": "jane.doe@acme-corp.com",
                "first_name": "Jane",
                "last_name": "Doe",
                "role": "team_lead",
                "status": "active",
                "department": "information_technology",
                "position": "Engineering Lead"
            }
        }
    }
