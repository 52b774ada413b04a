"""
Onboarding API routes: public submission of new-hire details and HR checklist handling.
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, status

from hrportal.core.permissions import HR_ROLES, Session, requires_role
from hrportal.domains.onboarding import workflow
from hrportal.domains.onboarding.service import onboarding_service
from hrportal.schemas.onboarding import HRAssignment, StepCompletion
from hrportal.validation.onboarding import EmployeeSubmission, SubmissionStatus, errors_as_dicts

router = APIRouter()


def to_wire(submission: EmployeeSubmission) -> Dict[str, Any]:
    return submission.model_dump(mode="json", by_alias=True)


@router.post("/submissions", status_code=status.HTTP_201_CREATED)
async def submit_employee_details(details: Dict[str, Any] = Body(...)):
    """
    Submit a new hire's details. No authentication is required.

    Args:
        details: Employee details keyed by camelCase field names

    Returns:
        The created submission

    Raises:
        HTTPException: 422 with every field failure when the details are invalid
    """
    try:
        result = await onboarding_service.submit_details(details)
        if not result.is_valid:
            raise HTTPException(status_code=422, detail=errors_as_dicts(result.errors))
        return to_wire(result.value)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error submitting onboarding details: {str(e)}"
        )


@router.get("/submissions")
async def get_submissions(
        skip: int = 0,
        limit: int = 100,
        status_filter: Optional[SubmissionStatus] = None,
        assigned_hr: Optional[str] = None,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    """
    List onboarding submissions, newest first.

    Args:
        skip: Number of records to skip
        limit: Maximum number of records to return
        status_filter: Only submissions in this status
        assigned_hr: Only submissions assigned to this HR user
        session: Caller's session

    Returns:
        List of submissions
    """
    try:
        submissions = await onboarding_service.get_submissions(
            status_filter.value if status_filter else None, assigned_hr, skip, limit
        )
        return [to_wire(submission) for submission in submissions]
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching onboarding submissions: {str(e)}"
        )


@router.get("/default-steps")
async def get_default_steps(session: Session = Depends(requires_role(*HR_ROLES))) -> List[Dict[str, Any]]:
    return [step.model_dump(mode="json", by_alias=True) for step in workflow.default_hr_steps()]


@router.get("/submissions/{submission_id}")
async def get_submission(
        submission_id: int,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    try:
        return to_wire(await onboarding_service.get_submission(submission_id))
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching onboarding submission: {str(e)}"
        )


@router.post("/submissions/{submission_id}/steps/{step_id}/complete")
async def complete_step(
        submission_id: int,
        step_id: str,
        completion: StepCompletion,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    """
    Complete an HR checklist step.

    The completer defaults to the caller's display name.

    Returns:
        The updated submission, with its status advanced when appropriate
    """
    try:
        submission = await onboarding_service.complete_step(
            submission_id,
            step_id,
            completion.completed_by or session.display_name,
            completion.notes
        )
        return to_wire(submission)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error completing onboarding step: {str(e)}"
        )


@router.put("/submissions/{submission_id}/assign")
async def assign_hr(
        submission_id: int,
        assignment: HRAssignment,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    try:
        return to_wire(await onboarding_service.assign_hr(submission_id, assignment.assigned_hr))
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error assigning onboarding submission: {str(e)}"
        )
