"""
Onboarding submission repository.

Submissions are stored with snake_case keys and an integer _id; they are
turned back into EmployeeSubmission values on the way out.
"""
import logging
from typing import Any, Dict, List, Optional

from hrportal.db.base_repository import BaseRepository
from hrportal.db.mongodb import get_employee_submissions_collection
from hrportal.validation.onboarding import EmployeeSubmission, validate_employee_submission

logger = logging.getLogger(__name__)


class OnboardingRepository(BaseRepository):
    """
    Repository for employee onboarding submissions.
    """

    def __init__(self, collection=None, counters=None):
        super().__init__(
            collection if collection is not None else get_employee_submissions_collection(),
            counters
        )

    @staticmethod
    def to_document(submission: EmployeeSubmission) -> Dict[str, Any]:
        document = submission.model_dump(mode="json", exclude={"id"})
        document["_id"] = submission.id
        return document

    @staticmethod
    def from_document(document: Dict[str, Any]) -> Optional[EmployeeSubmission]:
        """
        Rebuild a submission from its stored document.

        Returns None, with a warning, for documents that no longer validate.
        """
        data = dict(document)
        data["id"] = data.pop("_id")
        result = validate_employee_submission(data)
        if not result.is_valid:
            logger.warning(f"Stored submission {data['id']} is invalid: {result.error_paths()}")
            return None
        return result.value

    async def save(self, submission: EmployeeSubmission) -> EmployeeSubmission:
        document = await self.create(self.to_document(submission))
        return self.from_document(document)

    async def replace(self, submission: EmployeeSubmission) -> Optional[EmployeeSubmission]:
        document = self.to_document(submission)
        updated = await self.update(document.pop("_id"), document)
        return self.from_document(updated) if updated else None

    async def get(self, submission_id: Any) -> Optional[EmployeeSubmission]:
        document = await self.find_by_id(submission_id)
        return self.from_document(document) if document else None

    async def find_submissions(self,
                               status: Optional[str] = None,
                               assigned_hr: Optional[str] = None,
                               skip: int = 0,
                               limit: int = 100) -> List[EmployeeSubmission]:
        """
        List submissions, newest first.

        Args:
            status: Only submissions in this status
            assigned_hr: Only submissions assigned to this HR user
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            Submissions that still validate
        """
        query: Dict[str, Any] = {}
        if status:
            query["status"] = status
        if assigned_hr:
            query["assigned_hr"] = assigned_hr

        documents = await self.find_many(query, skip, limit, sort_by="submitted_at", sort_desc=True)
        submissions = [self.from_document(document) for document in documents]
        return [submission for submission in submissions if submission is not None]
