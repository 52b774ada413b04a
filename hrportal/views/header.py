"""
Page header: notification badge and profile avatar for the signed-in user.
"""
from typing import Optional

from pydantic import BaseModel

from hrportal.core.permissions import Session


class HeaderView(BaseModel):
    title: str
    subtitle: str
    display_name: str
    role_label: str
    profile_image_url: Optional[str] = None
    unread_count: int
    show_badge: bool


def build_header(session: Session, pending_approvals: int, title: str = "Dashboard") -> HeaderView:
    unread = max(pending_approvals, 0)
    return HeaderView(
        title=title,
        subtitle="Welcome back, here's what's happening today",
        display_name=session.display_name,
        role_label=session.role_display_name,
        profile_image_url=session.profile_image_url,
        unread_count=unread,
        show_badge=unread > 0,
    )
