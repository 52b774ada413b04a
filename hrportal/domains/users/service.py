"""
User service for business logic.
"""
import logging
from typing import Dict, Optional, Any
from fastapi import HTTPException, status

from hrportal.core.permissions import UserRole
from hrportal.core.security import get_password_hash, verify_password
from hrportal.domains.users.repository import UserRepository
from hrportal.models.user import UserStatus

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user-related business logic.
    """

    def __init__(self, user_repo: Optional[UserRepository] = None):
        """
        Initialize with user repository.

        Args:
            user_repo: Optional user repository instance
        """
        self.user_repo = user_repo or UserRepository()

    async def get_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        return await self.user_repo.find_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return await self.user_repo.find_by_email(email)

    async def create_user(self, user_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new user.

        Args:
            user_data: User data with a plain-text password

        Returns:
            Created user document

        Raises:
            HTTPException: If email already exists
        """
        user_data["email"] = user_data["email"].lower()
        if await self.user_repo.email_exists(user_data["email"]):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered"
            )

        if user_data.get("password"):
            user_data["password"] = get_password_hash(user_data["password"])

        user_data["role"] = UserRole(user_data.get("role", UserRole.EMPLOYEE)).value
        user_data.setdefault("status", UserStatus.ACTIVE.value)

        user = await self.user_repo.create(user_data)
        logger.info(f"Created user {user['email']} with role {user['role']}")
        return user

    async def authenticate_user(self, email: str, password: str) -> Optional[Dict[str, Any]]:
        """
        Authenticate a user with email and password.

        Returns:
            User document if authentication successful, None otherwise
        """
        user = await self.user_repo.find_by_email(email)
        if not user or not user.get("password"):
            return None

        if not verify_password(password, user["password"]):
            return None

        return user


# Create global instance
user_service = UserService()
