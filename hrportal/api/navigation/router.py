"""
Navigation API routes: what the shell should render for the caller.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status

from hrportal.core.permissions import Session, get_current_session, get_optional_session
from hrportal.domains.dashboard.service import dashboard_service
from hrportal.schemas.user import NavigationItemResponse
from hrportal.views.header import HeaderView, build_header
from hrportal.views.navigation import mark_active, visible_navigation
from hrportal.views.shell import resolve_view

router = APIRouter()


@router.get("/items", response_model=List[NavigationItemResponse])
async def get_navigation(location: str = "/", session: Session = Depends(get_current_session)):
    """
    Navigation destinations visible to the caller's role.

    Args:
        location: Current path, used to flag the active item
        session: Caller's session

    Returns:
        Visible navigation items in display order
    """
    return mark_active(visible_navigation(session), location)


@router.get("/header", response_model=HeaderView)
async def get_header(title: str = "Dashboard", session: Session = Depends(get_current_session)):
    try:
        pending = await dashboard_service.get_pending_approvals(session)
        return build_header(session, pending, title)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error building header: {str(e)}"
        )


@router.get("/resolve")
async def resolve_path(path: str = "/", session: Optional[Session] = Depends(get_optional_session)):
    """
    Resolve a client path to the view that should render it.

    Works without authentication; signed-out callers only reach public pages
    and the landing page.
    """
    view, params = resolve_view(path, session)
    return {"path": path, "view": view, "params": params, "authenticated": session is not None}
