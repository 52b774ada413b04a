"""
Read-only access to the collections that feed the dashboard.
"""
from typing import Any, Dict, List, Optional

from hrportal.db.base_repository import BaseRepository
from hrportal.db.mongodb import get_announcements_collection, get_tasks_collection


class TaskRepository(BaseRepository):

    def __init__(self, collection=None, counters=None):
        super().__init__(collection if collection is not None else get_tasks_collection(), counters)

    async def find_recent(self, assigned_to: Optional[str] = None, limit: int = 10) -> List[Dict[str, Any]]:
        query = {"assigned_to": assigned_to} if assigned_to else {}
        return await self.find_many(query, 0, limit, sort_by="updated_at", sort_desc=True)


class AnnouncementRepository(BaseRepository):

    def __init__(self, collection=None, counters=None):
        super().__init__(collection if collection is not None else get_announcements_collection(), counters)

    async def find_published(self, limit: int = 10) -> List[Dict[str, Any]]:
        return await self.find_many({"is_published": True}, 0, limit, sort_by="created_at", sort_desc=True)
