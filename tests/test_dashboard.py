from datetime import datetime, timedelta

import pytest
from fastapi import HTTPException

from hrportal.core.permissions import Session, UserRole
from hrportal.domains.dashboard.repository import AnnouncementRepository, TaskRepository
from hrportal.domains.dashboard.service import DashboardService
from hrportal.domains.employees.repository import EmployeeRepository
from hrportal.domains.employees.service import EmployeeService
from hrportal.domains.logistics.repository import LogisticsItemRepository, LogisticsRequestRepository
from hrportal.domains.logistics.service import LogisticsService
from hrportal.domains.psychometrics.repository import (
    PsychometricAttemptRepository,
    PsychometricQuestionRepository,
    PsychometricTestRepository,
)
from hrportal.domains.psychometrics.service import PsychometricService

NOW = datetime(2024, 3, 10, 12, 0, 0)


class StubUsers:
    """User lookups without password hashing."""

    def __init__(self, users):
        self.users = {user["_id"]: user for user in users}

    async def get_user_by_id(self, user_id):
        return self.users.get(str(user_id))


@pytest.fixture
def dashboard(db):
    users = StubUsers([{"_id": "u-emp", "email": "sam@example.com", "role": "employee"}])
    return DashboardService(
        TaskRepository(db["tasks"], db["counters"]),
        AnnouncementRepository(db["announcements"], db["counters"]),
        employees=EmployeeService(EmployeeRepository(db["employees"], db["counters"]), users),
        logistics=LogisticsService(
            LogisticsItemRepository(db["logistics_items"], db["counters"]),
            LogisticsRequestRepository(db["logistics_requests"], db["counters"]),
        ),
        psychometrics=PsychometricService(
            PsychometricTestRepository(db["psychometric_tests"], db["counters"]),
            PsychometricQuestionRepository(db["psychometric_questions"], db["counters"]),
            PsychometricAttemptRepository(db["psychometric_test_attempts"], db["counters"]),
        ),
    )


@pytest.fixture
def populated(db):
    db["tasks"].documents.extend([
        {"_id": 1, "title": "Sign contract", "status": "overdue", "assigned_to": "u-emp",
         "updated_at": NOW - timedelta(hours=5)},
        {"_id": 2, "title": "Review budget", "status": "pending", "assigned_to": "u-lead",
         "updated_at": NOW - timedelta(hours=1)},
    ])
    db["announcements"].documents.extend([
        {"_id": 1, "title": "Welcome", "content": "Hello all", "is_published": True,
         "created_at": NOW - timedelta(hours=2)},
        {"_id": 2, "title": "Managers sync", "content": "Agenda", "is_published": True,
         "target_roles": ["hr_admin", "team_lead"], "created_at": NOW - timedelta(hours=3)},
        {"_id": 3, "title": "Draft", "content": "Not yet", "is_published": False,
         "created_at": NOW},
    ])
    db["logistics_requests"].documents.extend([
        {"_id": 1, "requester_id": "u-emp", "item_name": "Chair", "quantity": 1, "status": "pending"},
        {"_id": 2, "requester_id": "u-emp", "item_name": "Desk", "quantity": 1, "status": "approved"},
    ])
    db["employees"].documents.append(
        {"_id": 1, "employee_id": "EMP-1", "user_id": "u-emp", "onboarding_status": "in_progress"}
    )
    return db


@pytest.mark.asyncio
async def test_employee_sees_own_tasks_and_open_announcements(dashboard, populated):
    session = Session(user_id="u-emp", role=UserRole.EMPLOYEE)

    activities = await dashboard.get_activities(session)

    assert [(a.type, a.id) for a in activities] == [("announcement", 1), ("task", 1)]


@pytest.mark.asyncio
async def test_team_lead_sees_targeted_announcements(dashboard, populated):
    session = Session(user_id="u-lead", role=UserRole.TEAM_LEAD)

    activities = await dashboard.get_activities(session)

    assert [(a.type, a.id) for a in activities] == [
        ("task", 2), ("announcement", 1), ("announcement", 2), ("task", 1)
    ]


@pytest.mark.asyncio
async def test_pending_approvals_only_for_logistics_roles(dashboard, populated):
    assert await dashboard.get_pending_approvals(Session(user_id="a", role=UserRole.LOGISTICS_MANAGER)) == 1
    assert await dashboard.get_pending_approvals(Session(user_id="b", role=UserRole.EMPLOYEE)) == 0


@pytest.mark.asyncio
async def test_stats(dashboard, populated):
    stats = await dashboard.get_stats(Session(user_id="a", role=UserRole.HR_ADMIN))

    assert stats["total_employees"] == 1
    assert stats["onboarding_employees"] == 1
    assert stats["open_tasks"] == 1
    assert stats["overdue_tasks"] == 1
    assert stats["pending_approvals"] == 1
    assert stats["psychometrics"]["total_tests"] == 0


@pytest.mark.asyncio
async def test_employee_progress(dashboard, populated):
    employees = dashboard.employees

    updated = await employees.update_onboarding_progress(1, 140)
    assert updated["onboarding_progress"] == 100
    assert updated["onboarding_status"] == "completed"
    assert updated["user"]["email"] == "sam@example.com"

    updated = await employees.update_onboarding_progress(1, 0)
    assert updated["onboarding_status"] == "not_started"


@pytest.mark.asyncio
async def test_create_employee(dashboard):
    employees = dashboard.employees

    created = await employees.create_employee({"user_id": "u-emp", "employee_id": "EMP-2"})

    assert created["onboarding_status"] == "not_started"
    assert created["onboarding_progress"] == 0
    assert created["user"]["email"] == "sam@example.com"

    with pytest.raises(HTTPException) as exc_info:
        await employees.create_employee({"user_id": "u-emp", "employee_id": "EMP-3"})
    assert exc_info.value.status_code == 400

    with pytest.raises(HTTPException) as exc_info:
        await employees.create_employee({"user_id": "u-missing", "employee_id": "EMP-4"})
    assert exc_info.value.status_code == 400
