"""
Auth service for authentication.
"""
import logging
from datetime import timedelta
from typing import Dict

from fastapi import HTTPException, status

from hrportal.core.config import settings
from hrportal.core.security import create_access_token
from hrportal.domains.users.service import user_service
from hrportal.models.user import UserStatus

logger = logging.getLogger(__name__)

# Onboarding hires may sign in to follow their own checklist
LOGIN_STATUSES = (UserStatus.ACTIVE.value, UserStatus.ONBOARDING.value)


class AuthService:
    """
    Service for authentication.
    """

    async def login(self, email: str, password: str) -> Dict[str, str]:
        """
        Login a user and return access token.

        Args:
            email: User email
            password: User password

        Returns:
            Dict with access token and token type

        Raises:
            HTTPException: If authentication fails
        """
        user = await user_service.authenticate_user(email, password)
        if not user or user.get("status", UserStatus.ACTIVE.value) not in LOGIN_STATUSES:
            logger.info(f"Failed login for {email}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(
            subject=str(user["_id"]),
            expires_delta=access_token_expires
        )

        return {"access_token": access_token, "token_type": "bearer"}


# Create global instance
auth_service = AuthService()
