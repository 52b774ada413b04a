"""
Dashboard API routes.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from hrportal.core.permissions import Session, get_current_session
from hrportal.domains.dashboard.service import dashboard_service
from hrportal.views.activity_feed import ActivityEntry, build_activity_feed

router = APIRouter()


@router.get("/activities", response_model=List[ActivityEntry])
async def get_activities(limit: int = 10, session: Session = Depends(get_current_session)):
    """
    Recent activity feed for the caller.

    Args:
        limit: Maximum number of entries
        session: Caller's session

    Returns:
        Feed entries, newest first
    """
    try:
        activities = await dashboard_service.get_activities(session, limit)
        return build_activity_feed(activities)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching activities: {str(e)}"
        )


@router.get("/stats")
async def get_stats(session: Session = Depends(get_current_session)):
    try:
        return await dashboard_service.get_stats(session)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching dashboard stats: {str(e)}"
        )
