# hrportal/models/psychometric.py
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class TestType(str, Enum):
    PERSONALITY = "personality"
    COGNITIVE = "cognitive"
    APTITUDE = "aptitude"
    EMOTIONAL_INTELLIGENCE = "emotional_intelligence"


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple_choice"
    SCALE = "scale"
    YES_NO = "yes_no"


class AttemptStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class PsychometricTestModel(BaseModel):
    """Database model for psychometric tests; test_name is the natural key"""
    id: Optional[int] = Field(default=None, alias="_id")
    test_name: str = Field(..., min_length=1, max_length=100)
    test_type: TestType
    description: Optional[str] = None
    instructions: Optional[str] = None
    time_limit: Optional[int] = Field(default=None, gt=0)  # minutes
    total_questions: int = Field(default=0, ge=0)
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True
    }


class PsychometricQuestionModel(BaseModel):
    """Database model for a test question; (test_id, order) is the natural key"""
    id: Optional[int] = Field(default=None, alias="_id")
    test_id: int
    question_text: str = Field(..., min_length=1)
    question_type: QuestionType
    options: Optional[List[str]] = None
    correct_answer: Optional[str] = None
    category: Optional[str] = None  # personality trait or cognitive domain
    order: int
    created_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True
    }


class QuestionResponse(BaseModel):
    question_id: int
    answer: str


class PsychometricTestAttemptModel(BaseModel):
    """Database model for a candidate's attempt at a test"""
    id: Optional[int] = Field(default=None, alias="_id")
    candidate_email: str = Field(..., max_length=255)
    candidate_name: str = Field(..., max_length=255)
    test_id: int
    responses: List[QuestionResponse]
    started_at: datetime = Field(default_factory=datetime.utcnow)
    completed_at: Optional[datetime] = None
    time_spent: Optional[int] = None  # seconds
    total_score: Optional[int] = None
    percentage_score: Optional[int] = None
    results: Optional[Dict[str, Any]] = None
    status: AttemptStatus = AttemptStatus.IN_PROGRESS
    ip_address: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = None

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True
    }
