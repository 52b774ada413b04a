"""
Top-level route resolution.

Public pages resolve for anyone. Everything else needs a Session; without
one only the landing page is reachable.
"""
import re
from typing import Optional, Tuple

from hrportal.core.permissions import Session, UserRole

PUBLIC_VIEWS = {
    "/onboarding-portal": "onboarding_portal",
    "/employee-onboarding": "employee_onboarding",
    "/psychometric-test": "psychometric_test",
    "/test-results": "test_results",
}

AUTHENTICATED_VIEWS = {
    "/employee": "employee_dashboard",
    "/employees": "employees",
    "/departments": "departments",
    "/onboarding": "onboarding",
    "/onboarding-checklist-manager": "onboarding_checklist_manager",
    "/hr-onboarding": "hr_onboarding",
    "/onboarding-pdf-export": "onboarding_pdf_export",
    "/logistics-pdf-export": "logistics_pdf_export",
    "/psychometric-admin": "psychometric_admin",
    "/candidates": "candidates",
    "/test-results-admin": "test_results_admin",
    "/tasks": "tasks",
    "/task-requests": "task_requests",
    "/announcements": "announcements",
    "/recognition": "recognition",
    "/logistics": "logistics",
    "/analytics": "analytics",
    "/reports": "reports",
    "/settings": "settings",
}

TASK_DETAIL = re.compile(r"^/tasks/(?P<task_id>[^/]+)$")

NOT_FOUND = "not_found"


def resolve_view(path: str, session: Optional[Session]) -> Tuple[str, dict]:
    """
    Pick the view for a path.

    Args:
        path: Requested path, query string excluded
        session: Caller's session, None when signed out

    Returns:
        Tuple of (view name, path parameters)
    """
    if len(path) > 1:
        path = path.rstrip("/")

    if path in PUBLIC_VIEWS:
        return PUBLIC_VIEWS[path], {}

    if session is None:
        return ("landing", {}) if path == "/" else (NOT_FOUND, {})

    if path == "/":
        if session.role == UserRole.EMPLOYEE:
            return "employee_dashboard", {}
        return "dashboard", {}

    if path in AUTHENTICATED_VIEWS:
        return AUTHENTICATED_VIEWS[path], {}

    match = TASK_DETAIL.match(path)
    if match:
        return "task_detail", match.groupdict()

    return NOT_FOUND, {}
