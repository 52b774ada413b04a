"""
Recent activity entries for the dashboard feed.
"""
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

from hrportal.utils.datetime_handler import DateTimeHandler

ICONS = {
    "task": "user-plus",
    "announcement": "bell-ring",
}
DEFAULT_ICON = "check"

LABELS = {
    "task": "Task",
    "announcement": "Announcement",
}


class ActivityItem(BaseModel):
    id: Any
    type: str
    title: str
    status: str
    timestamp: Optional[datetime] = None


class ActivityEntry(BaseModel):
    key: str
    label: str
    title: str
    icon: str
    color: str
    status: str
    badge: str
    time_ago: str


def activity_icon(activity_type: str) -> str:
    return ICONS.get(activity_type, DEFAULT_ICON)


def activity_color(status: str) -> str:
    if status == "overdue":
        return "bg-warning/10 text-warning"
    if status == "completed":
        return "bg-accent/10 text-accent"
    return "bg-primary/10 text-primary"


def badge_variant(status: str) -> str:
    if status == "overdue":
        return "bg-destructive/10 text-destructive"
    if status == "published":
        return "bg-primary/10 text-primary"
    return "bg-accent/10 text-accent"


def build_activity_feed(activities: Iterable[ActivityItem],
                        now: Optional[datetime] = None) -> List[ActivityEntry]:
    """
    Turn raw activities into display entries, keeping their order.

    Args:
        activities: Tasks and announcements as ActivityItems
        now: Reference time for relative timestamps

    Returns:
        One ActivityEntry per activity
    """
    return [
        ActivityEntry(
            key=f"{activity.type}-{activity.id}",
            label=LABELS.get(activity.type, "Announcement"),
            title=activity.title,
            icon=activity_icon(activity.type),
            color=activity_color(activity.status),
            status=activity.status,
            badge=badge_variant(activity.status),
            time_ago=DateTimeHandler.format_time_ago(activity.timestamp, now),
        )
        for activity in activities
    ]


def activities_from_documents(tasks: Iterable[Dict[str, Any]],
                              announcements: Iterable[Dict[str, Any]],
                              limit: int = 10) -> List[ActivityItem]:
    """Merge tasks and announcements into one list, newest first."""
    items = [
        ActivityItem(id=task["_id"], type="task", title=task["title"],
                     status=task.get("status", "pending"),
                     timestamp=task.get("updated_at") or task.get("created_at"))
        for task in tasks
    ]
    items += [
        ActivityItem(id=announcement["_id"], type="announcement", title=announcement["title"],
                     status="published" if announcement.get("is_published") else "draft",
                     timestamp=announcement.get("created_at"))
        for announcement in announcements
    ]
    items.sort(key=lambda item: item.timestamp or datetime.min, reverse=True)
    return items[:limit]
