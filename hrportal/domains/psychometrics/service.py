"""
Psychometric service for tests, questions, attempts and their scoring.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status

from hrportal.domains.psychometrics.repository import (
    PsychometricAttemptRepository,
    PsychometricQuestionRepository,
    PsychometricTestRepository,
)
from hrportal.domains.psychometrics.scoring import score_attempt
from hrportal.models.psychometric import AttemptStatus
from hrportal.utils.datetime_handler import DateTimeHandler
from hrportal.utils.id_handler import IdHandler

logger = logging.getLogger(__name__)


class PsychometricService:
    """
    Service for psychometric testing business logic.
    """

    def __init__(self,
                 test_repo: Optional[PsychometricTestRepository] = None,
                 question_repo: Optional[PsychometricQuestionRepository] = None,
                 attempt_repo: Optional[PsychometricAttemptRepository] = None):
        """
        Initialize with repositories.

        Args:
            test_repo: Optional test repository instance
            question_repo: Optional question repository instance
            attempt_repo: Optional attempt repository instance
        """
        self.test_repo = test_repo or PsychometricTestRepository()
        self.question_repo = question_repo or PsychometricQuestionRepository()
        self.attempt_repo = attempt_repo or PsychometricAttemptRepository()

    # Tests

    async def get_tests(self) -> List[Dict[str, Any]]:
        return await self.test_repo.find_all()

    async def get_test(self, test_id: Any) -> Dict[str, Any]:
        """
        Get a test by ID.

        Raises:
            HTTPException: If the test does not exist
        """
        test = await self.test_repo.find_by_id(test_id)
        return IdHandler.raise_if_not_found(test, "Test not found")

    async def create_test(self, test_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a test.

        Args:
            test_data: Test fields

        Returns:
            Created test document

        Raises:
            HTTPException: If a test with the same name exists
        """
        if await self.test_repo.find_by_name(test_data["test_name"]):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Test '{test_data['test_name']}' already exists"
            )

        test_data.setdefault("total_questions", 0)
        test_data.setdefault("is_active", True)
        return await self.test_repo.create(test_data)

    async def update_test(self, test_id: Any, test_data: Dict[str, Any]) -> Dict[str, Any]:
        update_data = {k: v for k, v in test_data.items() if v is not None}
        test = await self.test_repo.update(test_id, update_data)
        return IdHandler.raise_if_not_found(test, "Test not found")

    async def delete_test(self, test_id: Any) -> bool:
        """
        Delete a test together with its questions.

        Raises:
            HTTPException: If the test does not exist
        """
        test = await self.get_test(test_id)
        removed = await self.question_repo.delete_for_test(test["_id"])
        logger.info(f"Deleting test {test['_id']} and {removed} question(s)")
        return await self.test_repo.delete(test["_id"])

    # Questions

    async def get_questions(self, test_id: Any) -> List[Dict[str, Any]]:
        test = await self.get_test(test_id)
        return await self.question_repo.find_by_test(test["_id"])

    async def create_question(self, question_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Add a question to a test and refresh the test's question count.

        Args:
            question_data: Question fields including test_id and order

        Returns:
            Created question document

        Raises:
            HTTPException: If the test does not exist or the order is taken
        """
        test = await self.get_test(question_data["test_id"])
        question_data["test_id"] = test["_id"]

        existing = await self.question_repo.find_one(
            {"test_id": test["_id"], "order": question_data["order"]}
        )
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Test {test['_id']} already has a question at position {question_data['order']}"
            )

        question = await self.question_repo.create(question_data)
        await self.refresh_question_count(test["_id"])
        return question

    async def refresh_question_count(self, test_id: int) -> int:
        total = await self.question_repo.count_for_test(test_id)
        await self.test_repo.update(test_id, {"total_questions": total})
        return total

    # Attempts

    async def get_attempts(self,
                           test_id: Optional[int] = None,
                           candidate_email: Optional[str] = None,
                           skip: int = 0,
                           limit: int = 100) -> List[Dict[str, Any]]:
        return await self.attempt_repo.find_filtered(test_id, candidate_email, skip, limit)

    async def get_attempt(self, attempt_id: Any) -> Dict[str, Any]:
        attempt = await self.attempt_repo.find_by_id(attempt_id)
        return IdHandler.raise_if_not_found(attempt, "Test attempt not found")

    async def create_attempt(self, attempt_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Record an attempt, scoring it when the test has questions.

        Args:
            attempt_data: Candidate, test_id and responses

        Returns:
            Stored attempt including total_score, percentage_score and results

        Raises:
            HTTPException: If the test does not exist
        """
        test = await self.get_test(attempt_data["test_id"])
        questions = await self.question_repo.find_by_test(test["_id"])

        attempt_data["test_id"] = test["_id"]
        attempt_data.setdefault("started_at", DateTimeHandler.get_current_datetime())
        attempt_data.setdefault("status", AttemptStatus.COMPLETED.value)
        if attempt_data["status"] == AttemptStatus.COMPLETED.value:
            attempt_data.setdefault("completed_at", DateTimeHandler.get_current_datetime())

        if questions:
            attempt_data.update(score_attempt(test, questions, attempt_data.get("responses", [])))
        else:
            logger.warning(f"Test {test['_id']} has no questions; attempt stored unscored")

        return await self.attempt_repo.create(attempt_data)

    # Reporting

    async def export_tests(self) -> List[Dict[str, Any]]:
        """
        Get every test with its questions attached.

        Returns:
            Test documents each carrying a questions list
        """
        exported = []
        for test in await self.test_repo.find_all():
            questions = await self.question_repo.find_by_test(test["_id"])
            exported.append({**test, "questions": questions})
        return exported

    async def get_dashboard_stats(self) -> Dict[str, int]:
        tests = await self.test_repo.count()
        attempts = await self.attempt_repo.count()
        completed_query = {"status": AttemptStatus.COMPLETED.value}
        completed = await self.attempt_repo.count(completed_query)

        average = 0
        if completed:
            mean = await self.attempt_repo.average_percentage(completed_query)
            average = int((mean or 0) + 0.5)

        return {
            "total_tests": tests,
            "total_attempts": attempts,
            "completed_attempts": completed,
            "average_score": average,
        }


# Create global instance
psychometric_service = PsychometricService()
