# hrportal/models/onboarding_checklist.py
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class DocumentType(str, Enum):
    IMAGE = "image"
    PDF = "pdf"
    ANY = "any"


class OnboardingChecklistModel(BaseModel):
    """Database model for a per-employee onboarding checklist item"""
    id: Optional[int] = Field(default=None, alias="_id")
    employee_id: int
    item_title: str = Field(..., min_length=1)
    description: Optional[str] = None
    is_completed: bool = False
    completed_by: Optional[str] = None
    due_date: Optional[datetime] = None
    order: int = 0

    # Supporting document
    requires_document: bool = False
    document_type: Optional[DocumentType] = None
    document_url: Optional[str] = None
    document_name: Optional[str] = None
    is_document_verified: bool = False
    verified_by: Optional[str] = None
    verified_at: Optional[datetime] = None
    verification_notes: Optional[str] = None

    # Psychometric test link
    requires_psychometric_test: bool = False
    psychometric_test_id: Optional[int] = None
    psychometric_test_attempt_id: Optional[int] = None
    psychometric_test_completed: bool = False
    psychometric_test_score: Optional[int] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True
    }

    @model_validator(mode="after")
    def check_document_verification(self):
        if self.is_document_verified and not self.document_url:
            raise ValueError("A document must be uploaded before it can be verified")
        return self


class DocumentModel(BaseModel):
    """Database model for uploaded files"""
    id: Optional[int] = Field(default=None, alias="_id")
    filename: str = Field(..., min_length=1)
    original_name: str = Field(..., min_length=1)
    mime_type: str
    size: int = Field(..., ge=0)
    uploaded_by: Optional[str] = None
    related_to: Optional[str] = None  # employee id, task id, ...
    related_type: Optional[str] = None  # employee, task, logistics
    is_approved: bool = False
    approved_by: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True
    }
