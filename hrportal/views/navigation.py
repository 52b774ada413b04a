"""
Role-gated navigation.

Each destination lists the roles allowed to see it; filtering is plain set
membership against the caller's Session.
"""
from typing import FrozenSet, List, Tuple

from pydantic import BaseModel, ConfigDict

from hrportal.core.permissions import Session, UserRole

ALL_ROLES = frozenset(UserRole)
MANAGERS = frozenset({UserRole.HR_ADMIN, UserRole.BRANCH_MANAGER, UserRole.TEAM_LEAD})
HR = frozenset({UserRole.HR_ADMIN, UserRole.BRANCH_MANAGER})


class NavItem(BaseModel):
    label: str
    href: str
    icon: str
    roles: FrozenSet[UserRole]

    model_config = ConfigDict(frozen=True)

    def is_visible_to(self, role: UserRole) -> bool:
        return role in self.roles


NAVIGATION: Tuple[NavItem, ...] = (
    NavItem(label="Dashboard", href="/", icon="home", roles=ALL_ROLES),
    NavItem(label="Employees", href="/employees", icon="users", roles=MANAGERS),
    NavItem(label="Departments", href="/departments", icon="building", roles=HR),
    NavItem(label="Onboarding", href="/onboarding", icon="user-plus", roles=HR),
    NavItem(label="Onboarding Checklists", href="/onboarding-checklist-manager", icon="clipboard-list", roles=HR),
    NavItem(label="Psychometric Tests", href="/psychometric-admin", icon="brain", roles=HR),
    NavItem(label="Test Candidates", href="/candidates", icon="users", roles=HR),
    NavItem(label="Test Results", href="/test-results-admin", icon="target", roles=HR),
    NavItem(label="Tasks", href="/tasks", icon="check-square", roles=ALL_ROLES),
    NavItem(label="Task Requests", href="/task-requests", icon="inbox", roles=MANAGERS),
    NavItem(label="Announcements", href="/announcements", icon="megaphone", roles=ALL_ROLES),
    NavItem(label="Recognition", href="/recognition", icon="award", roles=ALL_ROLES),
    NavItem(label="Logistics", href="/logistics", icon="package",
            roles=frozenset({UserRole.HR_ADMIN, UserRole.BRANCH_MANAGER, UserRole.LOGISTICS_MANAGER})),
    NavItem(label="Analytics", href="/analytics", icon="bar-chart", roles=HR),
    NavItem(label="Reports", href="/reports", icon="file-text", roles=HR),
    NavItem(label="Settings", href="/settings", icon="settings", roles=ALL_ROLES),
)


def visible_navigation(session: Session, items: Tuple[NavItem, ...] = NAVIGATION) -> List[NavItem]:
    """Destinations the session's role may see, in table order."""
    return [item for item in items if item.is_visible_to(session.role)]


def mark_active(items: List[NavItem], location: str) -> List[dict]:
    return [{**item.model_dump(exclude={"roles"}), "active": item.href == location} for item in items]
