# hrportal/models/employee.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class DepartmentType(str, Enum):
    HUMAN_RESOURCES = "human_resources"
    INFORMATION_TECHNOLOGY = "information_technology"
    FINANCE_ACCOUNTING = "finance_accounting"
    SALES_MARKETING = "sales_marketing"
    OPERATIONS = "operations"
    CUSTOMER_SERVICE = "customer_service"
    RESEARCH_DEVELOPMENT = "research_development"
    LEGAL_COMPLIANCE = "legal_compliance"
    EXECUTIVE_MANAGEMENT = "executive_management"
    FACILITIES_MAINTENANCE = "facilities_maintenance"


class EmployeeModel(BaseModel):
    """Database model for employee records linked to a user account"""
    id: Optional[int] = Field(default=None, alias="_id")
    user_id: str
    employee_id: str  # company employee number, unique
    phone_number: Optional[str] = None
    address: Optional[str] = None
    emergency_contact: Optional[Dict[str, Any]] = None
    onboarding_status: str = "not_started"  # not_started, in_progress, completed
    onboarding_progress: int = Field(default=0, ge=0, le=100)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "user_id": "60d21b4967d0d8992e610c85",
                "employee_id": "EMP-0042",
                "phone_number": "555-123-4567",
                "onboarding_status": "in_progress",
                "onboarding_progress": 40
            }
        }
    }


class DepartmentModel(BaseModel):
    """Database model for departments"""
    id: Optional[int] = Field(default=None, alias="_id")
    code: DepartmentType
    name: str
    description: Optional[str] = None
    manager_id: Optional[str] = None
    budget_allocated: Optional[Decimal] = None
    headcount: int = 0
    location: Optional[str] = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True
    }
