# hrportal/models/recognition.py
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class RecognitionType(str, Enum):
    EMPLOYEE_OF_MONTH = "employee_of_month"
    ACHIEVEMENT = "achievement"
    MILESTONE = "milestone"


class RecognitionModel(BaseModel):
    """Database model for peer and manager recognition"""
    id: Optional[int] = Field(default=None, alias="_id")
    nominee_id: str
    nominated_by: str
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    type: RecognitionType
    is_approved: bool = False
    approved_by: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True
    }
