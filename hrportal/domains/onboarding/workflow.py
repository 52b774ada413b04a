"""
Onboarding status transitions.

The onboarding schemas accept any status together with any step state; this
module decides which status a submission should have and which moves are
allowed. Everything here is synchronous and free of I/O.
"""
from datetime import datetime
from typing import Iterable, List, Optional

from hrportal.utils.datetime_handler import DateTimeHandler
from hrportal.validation.onboarding import HROnboardingStep, OnboardingCategory, SubmissionStatus


class InvalidTransitionError(Exception):
    """Raised when a submission is asked to move to a status it cannot reach."""

    def __init__(self, current: SubmissionStatus, target: SubmissionStatus):
        self.current = SubmissionStatus(current)
        self.target = SubmissionStatus(target)
        super().__init__(f"Cannot move onboarding from {self.current.value} to {self.target.value}")


ALLOWED_TRANSITIONS = {
    SubmissionStatus.PENDING: {SubmissionStatus.IN_PROGRESS, SubmissionStatus.COMPLETED},
    SubmissionStatus.IN_PROGRESS: {SubmissionStatus.COMPLETED},
    SubmissionStatus.COMPLETED: set(),
}


def ensure_transition(current: SubmissionStatus, target: SubmissionStatus) -> SubmissionStatus:
    """
    Check that a submission may move from one status to another.

    Staying in the same status is always allowed.

    Args:
        current: Status the submission has now
        target: Status it should move to

    Returns:
        The target status

    Raises:
        InvalidTransitionError: If the move is not allowed
    """
    current = SubmissionStatus(current)
    target = SubmissionStatus(target)

    if current != target and target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidTransitionError(current, target)
    return target


def derive_status(current: SubmissionStatus,
                  steps: Optional[Iterable[HROnboardingStep]],
                  required_step_ids: Optional[Iterable[str]] = None) -> SubmissionStatus:
    """
    Work out the status a submission should have given its steps.

    A submission with no steps keeps its current status. Once any step is
    completed it is in progress, and once every required step is completed
    it is completed. Completed is terminal.

    Args:
        current: Status the submission has now
        steps: HR checklist steps
        required_step_ids: Step ids that must be done; defaults to every step

    Returns:
        The derived status
    """
    current = SubmissionStatus(current)
    if current == SubmissionStatus.COMPLETED:
        return current

    steps = list(steps or [])
    if not steps:
        return current

    done = {step.id for step in steps if step.is_completed}
    required = set(required_step_ids) if required_step_ids is not None else {step.id for step in steps}

    if required and required <= done:
        return SubmissionStatus.COMPLETED
    if done:
        return SubmissionStatus.IN_PROGRESS
    return current


def complete_step(steps: List[HROnboardingStep],
                  step_id: str,
                  completed_by: str,
                  notes: Optional[str] = None,
                  now: Optional[datetime] = None) -> List[HROnboardingStep]:
    """
    Mark one step as completed, recording who did it and when.

    A step that is already completed keeps its completer, time and notes;
    only a missing completer or time is filled in.

    Args:
        steps: Current steps
        step_id: Id of the step to complete
        completed_by: Name or id of the HR user closing the step
        notes: Optional notes to store on the step
        now: Completion time; defaults to the current UTC time

    Returns:
        New list of steps with the target step completed

    Raises:
        KeyError: If no step has the given id
    """
    completed_at = DateTimeHandler.to_iso_string(now or DateTimeHandler.get_current_datetime())

    updated = []
    found = False
    for step in steps:
        if step.id == step_id:
            found = True
            if step.is_completed:
                changes = {}
                if not step.completed_by:
                    changes["completed_by"] = completed_by
                if not step.completed_at:
                    changes["completed_at"] = completed_at
            else:
                changes = {
                    "is_completed": True,
                    "completed_by": completed_by,
                    "completed_at": completed_at,
                }
                if notes is not None:
                    changes["notes"] = notes
            if changes:
                step = step.model_copy(update=changes)
        updated.append(step)

    if not found:
        raise KeyError(step_id)
    return updated


def progress_percentage(steps: Optional[Iterable[HROnboardingStep]]) -> int:
    steps = list(steps or [])
    if not steps:
        return 0
    done = sum(1 for step in steps if step.is_completed)
    return int(done * 100 / len(steps))


_DEFAULT_STEPS = (
    ("welcome-package", "Send welcome package", "Email the welcome pack and first-day schedule",
     OnboardingCategory.PRE_ARRIVAL, 30, False),
    ("workspace", "Prepare workspace", "Assign a desk and order any missing furniture",
     OnboardingCategory.PRE_ARRIVAL, 60, False),
    ("signed-contract", "Collect signed contract", "Receive the signed employment contract",
     OnboardingCategory.DOCUMENTATION, 15, True),
    ("id-verification", "Verify identity documents", "Check ID and right-to-work documents",
     OnboardingCategory.DOCUMENTATION, 20, True),
    ("tax-forms", "Process tax forms", "File tax and payroll forms with finance",
     OnboardingCategory.DOCUMENTATION, 20, True),
    ("laptop", "Provision laptop", "Image and hand over the employee's laptop",
     OnboardingCategory.IT_SETUP, 90, False),
    ("email-account", "Create email account", "Create the company email account and mailbox",
     OnboardingCategory.IT_SETUP, 15, False),
    ("building-access", "Issue building access card", "Register the access badge for the office",
     OnboardingCategory.ACCESS_PERMISSIONS, 15, False),
    ("system-access", "Grant system access", "Grant access to HR, payroll and team tools",
     OnboardingCategory.ACCESS_PERMISSIONS, 30, False),
    ("company-orientation", "Company orientation", "Walk through policies, culture and benefits",
     OnboardingCategory.ORIENTATION, 120, False),
    ("team-introduction", "Team introduction", "Introduce the new hire to their team and buddy",
     OnboardingCategory.ORIENTATION, 45, False),
)


def default_hr_steps() -> List[HROnboardingStep]:
    """Standard HR checklist for a new hire, every step open."""
    return [
        HROnboardingStep(
            id=step_id,
            title=title,
            description=description,
            category=category,
            estimated_time=minutes,
            is_completed=False,
            requires_document=requires_document,
            document_uploaded=False if requires_document else None,
        )
        for step_id, title, description, category, minutes, requires_document in _DEFAULT_STEPS
    ]
