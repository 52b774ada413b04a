# hrportal/models/announcement.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from hrportal.core.permissions import UserRole


class AnnouncementModel(BaseModel):
    """Database model for announcements"""
    id: Optional[int] = Field(default=None, alias="_id")
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    author_id: Optional[str] = None
    is_published: bool = False
    target_roles: Optional[List[UserRole]] = None  # None means everyone
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True
    }

    def is_visible_to(self, role: UserRole) -> bool:
        if not self.is_published:
            return False
        return not self.target_roles or UserRole(role).value in self.target_roles
