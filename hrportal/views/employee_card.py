"""
Display attributes for an employee card in the directory.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel

from hrportal.core.permissions import UserRole, get_role_display_name
from hrportal.utils.datetime_handler import DateTimeHandler

STATUS_CLASSES = {
    "active": "status-active",
    "onboarding": "status-pending",
    "inactive": "status-inactive",
}


def status_class(status: Optional[str]) -> str:
    return STATUS_CLASSES.get(status or "", "status-inactive")


def role_label(role: Optional[str]) -> str:
    """Readable role name; unknown values are shown as stored."""
    try:
        return get_role_display_name(UserRole(role))
    except ValueError:
        return role or ""


class EmployeeCard(BaseModel):
    employee_id: str
    full_name: str
    position: Optional[str] = None
    email: str
    phone_number: Optional[str] = None
    department: Optional[str] = None
    profile_image_url: Optional[str] = None
    status: str
    status_class: str
    role_label: str
    start_date: Optional[str] = None
    onboarding_progress: Optional[int] = None


def build_employee_card(employee: Dict[str, Any], user: Dict[str, Any]) -> EmployeeCard:
    """
    Build the card for an employee record and its user account.

    Onboarding progress is included only while onboarding is unfinished.

    Args:
        employee: Employee document
        user: Linked user document

    Returns:
        EmployeeCard ready for display
    """
    user_status = user.get("status", "active")
    full_name = " ".join(part for part in (user.get("first_name"), user.get("last_name")) if part)

    progress = None
    if employee.get("onboarding_status") != "completed":
        progress = employee.get("onboarding_progress", 0)

    return EmployeeCard(
        employee_id=str(employee.get("employee_id", "")),
        full_name=full_name,
        position=user.get("position"),
        email=user.get("email", ""),
        phone_number=employee.get("phone_number"),
        department=user.get("department"),
        profile_image_url=user.get("profile_image_url"),
        status=user_status,
        status_class=status_class(user_status),
        role_label=role_label(user.get("role")),
        start_date=DateTimeHandler.format_date(user.get("start_date"), DateTimeHandler.DISPLAY_DATE_FORMAT),
        onboarding_progress=progress,
    )
