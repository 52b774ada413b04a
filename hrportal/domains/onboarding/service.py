"""
Onboarding service: accepts new-hire details and drives HR checklist progress.
"""
import logging
from typing import Any, List, Mapping, Optional

from fastapi import HTTPException, status

from hrportal.domains.onboarding.repository import OnboardingRepository
from hrportal.domains.onboarding import workflow
from hrportal.utils.datetime_handler import DateTimeHandler
from hrportal.utils.id_handler import IdHandler
from hrportal.validation.onboarding import (
    EmployeeSubmission,
    SubmissionStatus,
    completion_gaps,
    validate_employee_details,
    validate_employee_submission,
)
from hrportal.validation.result import ValidationResult

logger = logging.getLogger(__name__)


class OnboardingService:
    """
    Service for employee onboarding submissions.
    """

    def __init__(self, onboarding_repo: Optional[OnboardingRepository] = None):
        """
        Initialize with onboarding repository.

        Args:
            onboarding_repo: Optional onboarding repository instance
        """
        self.onboarding_repo = onboarding_repo or OnboardingRepository()

    async def submit_details(self, details: Mapping[str, Any]) -> ValidationResult:
        """
        Accept step one of onboarding from a new hire.

        A valid submission is stored as pending with the default HR checklist.

        Args:
            details: Raw employee details keyed by wire names

        Returns:
            ValidationResult holding the stored EmployeeSubmission or the field failures

        Raises:
            TypeError: If details is not a mapping
        """
        result = validate_employee_details(details)
        if not result.is_valid:
            logger.info(f"Rejected onboarding details: {result.error_paths()}")
            return result

        submission = EmployeeSubmission(
            id=await self.onboarding_repo.next_id(),
            employee_details=result.value,
            hr_steps=workflow.default_hr_steps(),
            status=SubmissionStatus.PENDING,
            submitted_at=DateTimeHandler.to_iso_string(DateTimeHandler.get_current_datetime()),
        )

        saved = await self.onboarding_repo.save(submission)
        logger.info(f"Onboarding submission {saved.id} created for {saved.employee_details.email}")
        return ValidationResult(value=saved)

    async def get_submissions(self,
                              status_filter: Optional[str] = None,
                              assigned_hr: Optional[str] = None,
                              skip: int = 0,
                              limit: int = 100) -> List[EmployeeSubmission]:
        return await self.onboarding_repo.find_submissions(status_filter, assigned_hr, skip, limit)

    async def get_submission(self, submission_id: Any) -> EmployeeSubmission:
        submission = await self.onboarding_repo.get(submission_id)
        return IdHandler.raise_if_not_found(submission, f"Onboarding submission {submission_id} not found")

    async def complete_step(self,
                            submission_id: Any,
                            step_id: str,
                            completed_by: str,
                            notes: Optional[str] = None) -> EmployeeSubmission:
        """
        Complete one HR step and advance the submission status.

        Args:
            submission_id: Submission ID
            step_id: HR step ID
            completed_by: HR user closing the step
            notes: Optional notes for the step

        Returns:
            Updated submission

        Raises:
            HTTPException: If the submission or step is missing or the status cannot advance
        """
        submission = await self.get_submission(submission_id)

        try:
            steps = workflow.complete_step(submission.hr_steps or [], step_id, completed_by, notes)
        except KeyError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Step {step_id} not found in submission {submission.id}"
            )

        new_status = workflow.derive_status(submission.status, steps)
        try:
            workflow.ensure_transition(submission.status, new_status)
        except workflow.InvalidTransitionError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

        changes = {"hr_steps": steps, "status": new_status}
        if new_status == SubmissionStatus.COMPLETED and not submission.completed_at:
            changes["completed_at"] = DateTimeHandler.to_iso_string(DateTimeHandler.get_current_datetime())
            logger.info(f"Onboarding submission {submission.id} completed")

        return await self._store(submission.model_copy(update=changes))

    async def assign_hr(self, submission_id: Any, hr_name: str) -> EmployeeSubmission:
        submission = await self.get_submission(submission_id)
        return await self._store(submission.model_copy(update={"assigned_hr": hr_name}))

    async def _store(self, submission: EmployeeSubmission) -> EmployeeSubmission:
        """Re-validate the whole aggregate before writing it back."""
        result = validate_employee_submission(submission.model_dump(by_alias=True))
        if not result.is_valid:
            raise HTTPException(
                status_code=422,
                detail=[error.model_dump() for error in result.errors]
            )

        for step in result.value.hr_steps or []:
            gaps = completion_gaps(step)
            if gaps:
                logger.warning(f"Submission {submission.id} step {step.id} completed without {', '.join(gaps)}")

        stored = await self.onboarding_repo.replace(result.value)
        return IdHandler.raise_if_not_found(stored, f"Onboarding submission {submission.id} not found")


# Create global instance
onboarding_service = OnboardingService()
