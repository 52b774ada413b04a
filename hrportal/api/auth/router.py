"""
Auth API routes for authentication.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from hrportal.core.permissions import Session, get_current_session, get_current_user
from hrportal.domains.auth.service import auth_service
from hrportal.schemas.auth import Token
from hrportal.schemas.user import SessionResponse, UserResponse
from hrportal.views.employee_card import role_label
from hrportal.views.navigation import mark_active, visible_navigation

router = APIRouter()


@router.post("/login", response_model=Token)
async def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends()):
    """
    Login with username (email) and password to get access token.

    Args:
        form_data: OAuth2 form with username and password

    Returns:
        Access token and token type
    """
    try:
        # The username field in OAuth2PasswordRequestForm contains the email
        return await auth_service.login(form_data.username, form_data.password)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Login error: {str(e)}"
        )


@router.get("/me", response_model=UserResponse)
async def read_users_me(
        current_user: dict = Depends(get_current_user),
        session: Session = Depends(get_current_session)
):
    """
    Get current user profile.

    Returns:
        Current user profile
    """
    return {**current_user, "role_label": role_label(current_user.get("role"))}


@router.get("/session", response_model=SessionResponse)
async def read_session(location: str = "/", session: Session = Depends(get_current_session)):
    """
    Get the caller's session with the navigation it may see.

    Args:
        location: Current path, used to flag the active navigation item
        session: Caller's session

    Returns:
        Session summary and visible navigation
    """
    return {
        "user_id": session.user_id,
        "display_name": session.display_name,
        "role": session.role,
        "role_label": session.role_display_name,
        "navigation": mark_active(visible_navigation(session), location),
    }
