"""
Logistics repositories for stocked items and purchase requests.
"""
from typing import Any, Dict, List, Optional

from hrportal.db.base_repository import BaseRepository
from hrportal.db.mongodb import get_logistics_items_collection, get_logistics_requests_collection


class LogisticsItemRepository(BaseRepository):
    """
    Repository for logistics items; names are unique.
    """

    def __init__(self, collection=None, counters=None):
        super().__init__(
            collection if collection is not None else get_logistics_items_collection(),
            counters
        )

    async def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"name": name})

    async def find_items(self, category: Optional[str] = None,
                         skip: int = 0, limit: int = 100) -> List[Dict[str, Any]]:
        query = {"category": category} if category else {}
        return await self.find_many(query, skip, limit, sort_by="name")


class LogisticsRequestRepository(BaseRepository):
    """
    Repository for logistics requests.
    """

    def __init__(self, collection=None, counters=None):
        super().__init__(
            collection if collection is not None else get_logistics_requests_collection(),
            counters
        )

    async def find_requests(self,
                            status: Optional[str] = None,
                            priority: Optional[str] = None,
                            requester_id: Optional[str] = None,
                            skip: int = 0,
                            limit: int = 100) -> List[Dict[str, Any]]:
        """
        Find requests, newest first.

        Args:
            status: Status or comma-separated statuses to include
            priority: Only requests with this priority
            requester_id: Only requests raised by this user
            skip: Number of documents to skip
            limit: Maximum number of documents to return

        Returns:
            List of request documents
        """
        query: Dict[str, Any] = {}

        if status:
            if "," in status:
                query["status"] = {"$in": [s.strip() for s in status.split(",")]}
            else:
                query["status"] = status

        if priority:
            query["priority"] = priority

        if requester_id:
            query["requester_id"] = requester_id

        return await self.find_many(query, skip, limit, sort_by="created_at", sort_desc=True)

    async def count_by_status(self, status: str) -> int:
        return await self.count({"status": status})
