"""
Role model and per-request session handling.

Roles form a closed set. A Session is built explicitly for every request from
the authenticated user and handed to whatever needs to know who is asking;
nothing here keeps process-wide user state.
"""
from enum import Enum
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, ValidationError

from hrportal.core.security import decode_access_token, oauth2_scheme, optional_oauth2_scheme


class UserRole(str, Enum):
    """Roles a signed-in user can hold"""
    HR_ADMIN = "hr_admin"
    BRANCH_MANAGER = "branch_manager"
    TEAM_LEAD = "team_lead"
    EMPLOYEE = "employee"
    LOGISTICS_MANAGER = "logistics_manager"


ROLE_DISPLAY_NAMES: Dict[UserRole, str] = {
    UserRole.HR_ADMIN: "HR Administrator",
    UserRole.BRANCH_MANAGER: "Branch Manager",
    UserRole.TEAM_LEAD: "Team Lead",
    UserRole.EMPLOYEE: "Employee",
    UserRole.LOGISTICS_MANAGER: "Logistics Manager",
}

# Roles allowed to manage onboarding submissions and psychometric content
HR_ROLES = frozenset({UserRole.HR_ADMIN, UserRole.BRANCH_MANAGER})

# Roles allowed to act on logistics requests
LOGISTICS_ROLES = frozenset({UserRole.HR_ADMIN, UserRole.LOGISTICS_MANAGER})


def get_role_display_name(role: UserRole) -> str:
    return ROLE_DISPLAY_NAMES[UserRole(role)]


class Session(BaseModel):
    """
    Identity of the caller for a single request.

    Building a Session with a role outside UserRole fails with a
    ValidationError, so an unknown role never reaches a view.
    """
    user_id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole

    model_config = ConfigDict(frozen=True)

    @property
    def display_name(self) -> str:
        full_name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full_name or "User"

    @property
    def role_display_name(self) -> str:
        return ROLE_DISPLAY_NAMES[self.role]

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles

    @classmethod
    def from_user(cls, user: Dict[str, Any]) -> "Session":
        """
        Build a session from a user document.

        Args:
            user: User document with _id and role fields

        Returns:
            Session instance

        Raises:
            ValidationError: If the stored role is not a known UserRole
        """
        return cls(
            user_id=str(user["_id"]),
            email=user.get("email"),
            first_name=user.get("first_name"),
            last_name=user.get("last_name"),
            profile_image_url=user.get("profile_image_url"),
            role=user.get("role"),
        )


async def get_current_user(token: str = Depends(oauth2_scheme)) -> Dict[str, Any]:
    """
    Get the current user from JWT token.

    Args:
        token: JWT token from Authorization header

    Returns:
        User dictionary

    Raises:
        HTTPException: If token is invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    user_id = decode_access_token(token)
    if user_id is None:
        raise credentials_exception

    from hrportal.domains.users.service import user_service
    user = await user_service.get_user_by_id(user_id)

    if user is None:
        raise credentials_exception

    return user


async def get_current_session(current_user: Dict[str, Any] = Depends(get_current_user)) -> Session:
    """
    Build the request session for the authenticated user.

    Raises:
        HTTPException: If the user is inactive or holds an unrecognized role
    """
    if current_user.get("status", "active") not in ("active", "onboarding"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user"
        )

    try:
        return Session.from_user(current_user)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Unrecognized role: {current_user.get('role')}"
        )


def requires_role(*roles: UserRole) -> Callable:
    """
    FastAPI dependency for routes restricted to a set of roles.

    Args:
        roles: Roles allowed to call the route

    Returns:
        Dependency function yielding the caller's Session
    """
    allowed = frozenset(roles)

    async def dependency(session: Session = Depends(get_current_session)) -> Session:
        if session.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not enough permissions"
            )
        return session

    return dependency


async def get_optional_session(token: Optional[str] = Depends(optional_oauth2_scheme)) -> Optional[Session]:
    """
    Session for routes open to signed-out visitors.

    Returns:
        Session, or None when no usable token was sent
    """
    if not token:
        return None

    try:
        user = await get_current_user(token)
        return await get_current_session(user)
    except HTTPException:
        return None
