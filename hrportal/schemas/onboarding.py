"""
Request schemas for HR actions on onboarding submissions.

Submission bodies themselves are validated by hrportal.validation.onboarding
so that every field failure is reported together.
"""
from typing import Optional
from pydantic import BaseModel, Field


class StepCompletion(BaseModel):
    """Schema for closing an HR checklist step"""
    completed_by: Optional[str] = None  # defaults to the caller's name
    notes: Optional[str] = None


class HRAssignment(BaseModel):
    """Schema for assigning a submission to an HR user"""
    assigned_hr: str = Field(..., min_length=1)
