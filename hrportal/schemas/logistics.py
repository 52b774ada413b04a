# hrportal/schemas/logistics.py
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from hrportal.models.logistics import LogisticsPriority


class LogisticsItemCreate(BaseModel):
    """Schema for adding a stocked item"""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: str = Field(..., min_length=1)
    quantity: int = Field(default=0, ge=0)
    min_quantity: int = Field(default=0, ge=0)
    location: Optional[str] = None


class LogisticsItemResponse(LogisticsItemCreate):
    """Schema for returning a stocked item"""
    id: int = Field(..., alias="_id")
    is_low_stock: bool
    last_updated: Optional[datetime] = None

    model_config = {
        "populate_by_name": True
    }


class StockAdjustment(BaseModel):
    """Schema for changing an item's quantity"""
    delta: int


class LogisticsRequestCreate(BaseModel):
    """Schema for raising a purchase request"""
    item_id: Optional[int] = None
    item_name: Optional[str] = None
    description: Optional[str] = None
    quantity: int = Field(..., gt=0)
    reason: Optional[str] = None
    priority: LogisticsPriority = LogisticsPriority.MEDIUM
    estimated_cost: Optional[float] = Field(default=None, ge=0)

    model_config = {
        "use_enum_values": True
    }


class LogisticsRequestResponse(BaseModel):
    """Schema for returning a purchase request"""
    id: int = Field(..., alias="_id")
    requester_id: str
    item_id: Optional[int] = None
    item_name: Optional[str] = None
    description: Optional[str] = None
    quantity: int
    reason: Optional[str] = None
    status: str
    priority: str
    estimated_cost: Optional[float] = None
    actual_cost: Optional[float] = None
    vendor: Optional[str] = None
    purchase_date: Optional[datetime] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "populate_by_name": True
    }


class LogisticsRequestApprove(BaseModel):
    """Schema for approving a request"""
    notes: Optional[str] = None


class LogisticsRequestReject(BaseModel):
    """Schema for rejecting a request"""
    reason: str = Field(..., min_length=1)


class LogisticsRequestPurchase(BaseModel):
    """Schema for recording a purchase"""
    vendor: Optional[str] = None
    actual_cost: Optional[float] = Field(default=None, ge=0)
    purchase_date: Optional[datetime] = None
    receipt_url: Optional[str] = None


class LogisticsRequestComplete(BaseModel):
    """Schema for closing a request"""
    notes: Optional[str] = None
