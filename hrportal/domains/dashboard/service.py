"""
Dashboard service: recent activity, headline numbers and the header badge.
"""
from typing import Any, Dict, List, Optional

from hrportal.core.permissions import LOGISTICS_ROLES, Session, UserRole
from hrportal.domains.dashboard.repository import AnnouncementRepository, TaskRepository
from hrportal.domains.employees.service import employee_service
from hrportal.domains.logistics.service import logistics_service
from hrportal.domains.psychometrics.service import psychometric_service
from hrportal.models.announcement import AnnouncementModel
from hrportal.models.task import TaskStatus
from hrportal.views.activity_feed import ActivityItem, activities_from_documents


class DashboardService:
    """
    Service assembling dashboard data for one session.
    """

    def __init__(self,
                 task_repo: Optional[TaskRepository] = None,
                 announcement_repo: Optional[AnnouncementRepository] = None,
                 employees=None,
                 logistics=None,
                 psychometrics=None):
        self.task_repo = task_repo or TaskRepository()
        self.announcement_repo = announcement_repo or AnnouncementRepository()

        self.employees = employees or employee_service
        self.logistics = logistics or logistics_service
        self.psychometrics = psychometrics or psychometric_service

    async def get_activities(self, session: Session, limit: int = 10) -> List[ActivityItem]:
        """
        Recent tasks and announcements the session may see.

        Employees only see their own tasks and announcements aimed at their role.

        Args:
            session: Caller's session
            limit: Maximum number of activities

        Returns:
            Activities, newest first
        """
        assigned_to = session.user_id if session.role == UserRole.EMPLOYEE else None
        tasks = await self.task_repo.find_recent(assigned_to, limit)

        announcements = [
            announcement
            for announcement in await self.announcement_repo.find_published(limit)
            if AnnouncementModel.model_validate(announcement).is_visible_to(session.role)
        ]

        return activities_from_documents(tasks, announcements, limit)

    async def get_pending_approvals(self, session: Session) -> int:
        """Logistics requests waiting on this session's decision."""
        if session.role not in LOGISTICS_ROLES:
            return 0
        return await self.logistics.count_pending()

    async def get_stats(self, session: Session) -> Dict[str, Any]:
        employees = await self.employees.employee_repo.count()
        onboarding = await self.employees.employee_repo.count(
            {"onboarding_status": {"$in": ["not_started", "in_progress"]}}
        )
        open_tasks = await self.task_repo.count(
            {"status": {"$in": [TaskStatus.PENDING.value, TaskStatus.IN_PROGRESS.value]}}
        )
        overdue_tasks = await self.task_repo.count({"status": TaskStatus.OVERDUE.value})

        return {
            "total_employees": employees,
            "onboarding_employees": onboarding,
            "open_tasks": open_tasks,
            "overdue_tasks": overdue_tasks,
            "pending_approvals": await self.get_pending_approvals(session),
            "psychometrics": await self.psychometrics.get_dashboard_stats(),
        }


# Create global instance
dashboard_service = DashboardService()
