from typing import Optional
from pydantic import BaseModel, Field


class EmployeeCreate(BaseModel):
    """Schema for creating an employee record for an existing user"""
    user_id: str
    employee_id: str = Field(..., min_length=1)
    phone_number: Optional[str] = None
    address: Optional[str] = None


class OnboardingProgressUpdate(BaseModel):
    """Schema for recording onboarding progress"""
    progress: int = Field(..., ge=0, le=100)
