"""
User repository for database operations.
"""
from typing import Dict, Optional, Any

from hrportal.db.base_repository import BaseRepository
from hrportal.db.mongodb import get_users_collection


class UserRepository(BaseRepository):
    """
    Repository for user data access.
    Users keep ObjectId keys instead of serial ids.
    """

    sequence_ids = False

    def __init__(self, collection=None):
        """Initialize with users collection."""
        super().__init__(collection if collection is not None else get_users_collection())

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"email": email.lower()})

    async def email_exists(self, email: str) -> bool:
        count = await self.collection.count_documents({"email": email.lower()})
        return count > 0
