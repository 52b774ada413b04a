"""
Psychometric repositories for tests, questions and attempts.
"""
from typing import Any, Dict, List, Optional

from hrportal.db.base_repository import BaseRepository
from hrportal.db.mongodb import (
    get_psychometric_attempts_collection,
    get_psychometric_questions_collection,
    get_psychometric_tests_collection,
)


class PsychometricTestRepository(BaseRepository):
    """Repository for psychometric tests."""

    def __init__(self, collection=None, counters=None):
        super().__init__(
            collection if collection is not None else get_psychometric_tests_collection(),
            counters
        )

    async def find_by_name(self, test_name: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"test_name": test_name})

    async def find_all(self) -> List[Dict[str, Any]]:
        return await self.find_many({}, limit=None, sort_by="created_at", sort_desc=True)


class PsychometricQuestionRepository(BaseRepository):
    """Repository for questions; a question is unique per (test_id, order)."""

    def __init__(self, collection=None, counters=None):
        super().__init__(
            collection if collection is not None else get_psychometric_questions_collection(),
            counters
        )

    async def find_by_test(self, test_id: int) -> List[Dict[str, Any]]:
        """
        Get the questions of a test in presentation order.

        Args:
            test_id: Test ID

        Returns:
            Question documents sorted by order
        """
        return await self.find_many({"test_id": test_id}, limit=None, sort_by="order")

    async def count_for_test(self, test_id: int) -> int:
        return await self.count({"test_id": test_id})

    async def delete_for_test(self, test_id: int) -> int:
        result = await self.collection.delete_many({"test_id": test_id})
        return result.deleted_count


class PsychometricAttemptRepository(BaseRepository):
    """Repository for candidate attempts."""

    def __init__(self, collection=None, counters=None):
        super().__init__(
            collection if collection is not None else get_psychometric_attempts_collection(),
            counters
        )

    async def find_filtered(self,
                            test_id: Optional[int] = None,
                            candidate_email: Optional[str] = None,
                            skip: int = 0,
                            limit: int = 100) -> List[Dict[str, Any]]:
        """
        Get attempts, newest first.

        Args:
            test_id: Only attempts at this test
            candidate_email: Only attempts by this candidate

        Returns:
            Attempt documents
        """
        query: Dict[str, Any] = {}
        if test_id is not None:
            query["test_id"] = test_id
        if candidate_email:
            query["candidate_email"] = candidate_email

        return await self.find_many(query, skip, limit, sort_by="started_at", sort_desc=True)

    async def average_percentage(self, query: Dict[str, Any]) -> Optional[float]:
        """
        Average percentage_score over every matching attempt.

        Unscored attempts count as 0. Returns None when nothing matches.
        """
        pipeline = [
            {"$match": query},
            {"$group": {
                "_id": None,
                "average": {"$avg": {"$ifNull": ["$percentage_score", 0]}},
            }},
        ]
        groups = await self.collection.aggregate(pipeline).to_list(length=1)
        return groups[0]["average"] if groups else None
