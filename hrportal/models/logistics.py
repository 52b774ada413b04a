# hrportal/models/logistics.py
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class LogisticsRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PURCHASED = "purchased"
    COMPLETED = "completed"


class LogisticsPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class LogisticsItemModel(BaseModel):
    """Database model for stocked items; name is the natural key"""
    id: Optional[int] = Field(default=None, alias="_id")
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: str = Field(..., min_length=1)
    quantity: int = Field(default=0, ge=0)
    min_quantity: int = Field(default=0, ge=0)
    location: Optional[str] = None
    last_updated: datetime = Field(default_factory=datetime.utcnow)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "name": "Wireless Keyboards",
                "description": "Logitech wireless keyboards with number pad",
                "category": "IT Equipment",
                "quantity": 25,
                "min_quantity": 8,
                "location": "IT Storage Room A"
            }
        }
    }

    @property
    def is_low_stock(self) -> bool:
        return self.quantity < self.min_quantity


class LogisticsRequestModel(BaseModel):
    """Database model for purchase / supply requests"""
    id: Optional[int] = Field(default=None, alias="_id")
    requester_id: str
    item_id: Optional[int] = None
    item_name: Optional[str] = None  # for items not yet stocked
    description: Optional[str] = None
    quantity: int = Field(..., gt=0)
    reason: Optional[str] = None
    status: LogisticsRequestStatus = LogisticsRequestStatus.PENDING
    priority: LogisticsPriority = LogisticsPriority.MEDIUM
    estimated_cost: Optional[float] = Field(default=None, ge=0)
    actual_cost: Optional[float] = Field(default=None, ge=0)
    vendor: Optional[str] = None
    purchase_date: Optional[datetime] = None
    receipt_url: Optional[str] = None
    receipt_filename: Optional[str] = None
    notes: Optional[str] = None
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True,
        "json_schema_extra": {
            "example": {
                "requester_id": "60d21b4967d0d8992e610c85",
                "item_name": "Ergonomic Office Chairs",
                "description": "Need 5 ergonomic chairs for new hires",
                "quantity": 5,
                "reason": "New employee onboarding - expanding team",
                "priority": "high",
                "estimated_cost": 750.0
            }
        }
    }
