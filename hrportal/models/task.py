# hrportal/models/task.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TaskModel(BaseModel):
    """Database model for tasks"""
    id: Optional[int] = Field(default=None, alias="_id")
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    assigned_to: Optional[str] = None
    assigned_by: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True
    }


class TaskUpdateModel(BaseModel):
    """Daily progress note on a task"""
    id: Optional[int] = Field(default=None, alias="_id")
    task_id: int
    user_id: str
    update_text: str = Field(..., min_length=1)
    progress_percentage: int = Field(default=0, ge=0, le=100)
    hours_worked: Decimal = Decimal("0")
    challenges: Optional[str] = None
    next_steps: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True
    }
