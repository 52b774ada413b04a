"""
Employee repository for database operations.
"""
from typing import Dict, Optional, Any

from hrportal.db.base_repository import BaseRepository
from hrportal.db.mongodb import get_employees_collection


class EmployeeRepository(BaseRepository):
    """
    Repository for employee records.
    Extends BaseRepository with employee-specific lookups.
    """

    def __init__(self, collection=None, counters=None):
        """Initialize with employees collection."""
        super().__init__(
            collection if collection is not None else get_employees_collection(),
            counters
        )

    async def find_by_user_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"user_id": str(user_id)})

    async def find_by_employee_number(self, employee_id: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"employee_id": employee_id})
