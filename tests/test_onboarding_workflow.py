from datetime import datetime

import pytest

from hrportal.domains.onboarding import workflow
from hrportal.domains.onboarding.workflow import InvalidTransitionError
from hrportal.validation.onboarding import HROnboardingStep, OnboardingCategory, SubmissionStatus


def step(step_id, done=False):
    return HROnboardingStep(
        id=step_id,
        title=step_id.title(),
        description="",
        category=OnboardingCategory.ORIENTATION,
        estimated_time=10,
        is_completed=done,
    )


class TestDeriveStatus:

    def test_no_steps_keeps_status(self):
        assert workflow.derive_status(SubmissionStatus.PENDING, []) == SubmissionStatus.PENDING
        assert workflow.derive_status(SubmissionStatus.PENDING, None) == SubmissionStatus.PENDING

    def test_nothing_done_keeps_status(self):
        steps = [step("a"), step("b")]
        assert workflow.derive_status(SubmissionStatus.PENDING, steps) == SubmissionStatus.PENDING

    def test_any_done_is_in_progress(self):
        steps = [step("a", done=True), step("b")]
        assert workflow.derive_status(SubmissionStatus.PENDING, steps) == SubmissionStatus.IN_PROGRESS

    def test_all_done_is_completed(self):
        steps = [step("a", done=True), step("b", done=True)]
        assert workflow.derive_status("in_progress", steps) == SubmissionStatus.COMPLETED

    def test_only_required_steps_count_for_completion(self):
        steps = [step("a", done=True), step("b")]
        derived = workflow.derive_status(SubmissionStatus.IN_PROGRESS, steps, required_step_ids=["a"])
        assert derived == SubmissionStatus.COMPLETED

    def test_completed_is_terminal(self):
        assert workflow.derive_status(SubmissionStatus.COMPLETED, [step("a")]) == SubmissionStatus.COMPLETED


class TestTransitions:

    @pytest.mark.parametrize("current, target", [
        ("pending", "pending"),
        ("pending", "in_progress"),
        ("pending", "completed"),
        ("in_progress", "completed"),
        ("completed", "completed"),
    ])
    def test_allowed(self, current, target):
        assert workflow.ensure_transition(current, target) == SubmissionStatus(target)

    @pytest.mark.parametrize("current, target", [
        ("in_progress", "pending"),
        ("completed", "in_progress"),
        ("completed", "pending"),
    ])
    def test_rejected(self, current, target):
        with pytest.raises(InvalidTransitionError) as exc_info:
            workflow.ensure_transition(current, target)

        assert exc_info.value.current == SubmissionStatus(current)
        assert exc_info.value.target == SubmissionStatus(target)
        assert current in str(exc_info.value)


class TestCompleteStep:

    def test_records_completer(self):
        steps = [step("a"), step("b")]
        now = datetime(2024, 3, 2, 10, 30, 15, 999)

        updated = workflow.complete_step(steps, "b", "Dana Lee", notes="Keys handed over", now=now)

        assert updated[0] == steps[0]
        assert updated[1].is_completed
        assert updated[1].completed_by == "Dana Lee"
        assert updated[1].completed_at == "2024-03-02T10:30:15Z"
        assert updated[1].notes == "Keys handed over"

    def test_does_not_mutate_input(self):
        steps = [step("a")]

        workflow.complete_step(steps, "a", "Dana Lee")

        assert not steps[0].is_completed

    def test_completed_step_keeps_its_completer(self):
        first = workflow.complete_step([step("a")], "a", "Dana Lee", notes="Done",
                                       now=datetime(2024, 3, 2, 9, 0, 0))

        again = workflow.complete_step(first, "a", "Sam Ortiz", notes="Redone",
                                       now=datetime(2024, 3, 5, 9, 0, 0))

        assert again == first
        assert again[0].completed_by == "Dana Lee"
        assert again[0].completed_at == "2024-03-02T09:00:00Z"
        assert again[0].notes == "Done"

    def test_completed_step_gains_missing_completer(self):
        closed = [step("a", done=True)]

        updated = workflow.complete_step(closed, "a", "Sam Ortiz", notes="Late",
                                         now=datetime(2024, 3, 5, 9, 0, 0))

        assert updated[0].completed_by == "Sam Ortiz"
        assert updated[0].completed_at == "2024-03-05T09:00:00Z"
        assert updated[0].notes is None

    def test_unknown_step(self):
        with pytest.raises(KeyError):
            workflow.complete_step([step("a")], "missing", "Dana Lee")


def test_progress_percentage():
    assert workflow.progress_percentage([]) == 0
    assert workflow.progress_percentage([step("a", True), step("b"), step("c")]) == 33
    assert workflow.progress_percentage([step("a", True), step("b", True)]) == 100


def test_default_steps_cover_every_category():
    steps = workflow.default_hr_steps()

    assert {s.category for s in steps} == set(OnboardingCategory)
    assert len({s.id for s in steps}) == len(steps)
    assert not any(s.is_completed for s in steps)

    documentation = [s for s in steps if s.category == OnboardingCategory.DOCUMENTATION]
    assert documentation
    assert all(s.requires_document and s.document_uploaded is False for s in documentation)
