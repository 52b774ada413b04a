# hrportal/schemas/psychometric.py
from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from hrportal.models.psychometric import QuestionResponse, QuestionType, TestType


class PsychometricTestCreate(BaseModel):
    """Schema for creating a test"""
    test_name: str = Field(..., min_length=1, max_length=100)
    test_type: TestType
    description: Optional[str] = None
    instructions: Optional[str] = None
    time_limit: Optional[int] = Field(default=None, gt=0)
    is_active: bool = True

    model_config = {
        "use_enum_values": True
    }


class PsychometricTestUpdate(BaseModel):
    """Schema for updating a test"""
    test_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    test_type: Optional[TestType] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    time_limit: Optional[int] = Field(default=None, gt=0)
    is_active: Optional[bool] = None

    model_config = {
        "use_enum_values": True,
        "extra": "ignore"
    }


class PsychometricTestResponse(BaseModel):
    """Schema for returning a test"""
    id: int = Field(..., alias="_id")
    test_name: str
    test_type: str
    description: Optional[str] = None
    instructions: Optional[str] = None
    time_limit: Optional[int] = None
    total_questions: int = 0
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

    model_config = {
        "populate_by_name": True
    }


class PsychometricQuestionCreate(BaseModel):
    """Schema for adding a question to a test"""
    test_id: int
    question_text: str = Field(..., min_length=1)
    question_type: QuestionType
    options: Optional[List[str]] = None
    correct_answer: Optional[str] = None
    category: Optional[str] = None
    order: int = Field(..., ge=1)

    model_config = {
        "use_enum_values": True
    }


class PsychometricQuestionResponse(BaseModel):
    """Schema for returning a question"""
    id: int = Field(..., alias="_id")
    test_id: int
    question_text: str
    question_type: str
    options: Optional[List[str]] = None
    correct_answer: Optional[str] = None
    category: Optional[str] = None
    order: int

    model_config = {
        "populate_by_name": True
    }


class PsychometricTestExport(PsychometricTestResponse):
    """Schema for a test together with its questions"""
    questions: List[PsychometricQuestionResponse] = []


class PsychometricAttemptCreate(BaseModel):
    """Schema for submitting a completed attempt"""
    candidate_email: EmailStr
    candidate_name: str = Field(..., min_length=1, max_length=255)
    test_id: int
    responses: List[QuestionResponse]
    time_spent: Optional[int] = Field(default=None, ge=0)


class PsychometricAttemptResponse(BaseModel):
    """Schema for returning an attempt"""
    id: int = Field(..., alias="_id")
    candidate_email: str
    candidate_name: str
    test_id: int
    responses: List[QuestionResponse]
    started_at: datetime
    completed_at: Optional[datetime] = None
    time_spent: Optional[int] = None
    total_score: Optional[int] = None
    percentage_score: Optional[int] = None
    results: Optional[Dict[str, Any]] = None
    status: str

    model_config = {
        "populate_by_name": True
    }


class PsychometricStats(BaseModel):
    total_tests: int
    total_attempts: int
    completed_attempts: int
    average_score: int
