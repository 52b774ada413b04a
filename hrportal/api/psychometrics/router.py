"""
Psychometric API routes.

Taking a test is public: candidates read active tests and their questions
and submit attempts without an account. Managing tests and reading results
needs an HR role.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status

from hrportal.core.permissions import HR_ROLES, Session, requires_role
from hrportal.domains.psychometrics.service import psychometric_service
from hrportal.schemas.psychometric import (
    PsychometricAttemptCreate,
    PsychometricAttemptResponse,
    PsychometricQuestionCreate,
    PsychometricQuestionResponse,
    PsychometricStats,
    PsychometricTestCreate,
    PsychometricTestExport,
    PsychometricTestResponse,
    PsychometricTestUpdate,
)

router = APIRouter()


@router.get("/tests", response_model=List[PsychometricTestResponse])
async def get_tests():
    try:
        return await psychometric_service.get_tests()
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching psychometric tests: {str(e)}"
        )


@router.get("/tests/export", response_model=List[PsychometricTestExport])
async def export_tests(session: Session = Depends(requires_role(*HR_ROLES))):
    """
    Every test with its questions, for printing.

    Returns:
        Tests each carrying their ordered questions
    """
    try:
        return await psychometric_service.export_tests()
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error exporting psychometric tests: {str(e)}"
        )


@router.get("/tests/{test_id}", response_model=PsychometricTestResponse)
async def get_test(test_id: int):
    try:
        return await psychometric_service.get_test(test_id)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching psychometric test: {str(e)}"
        )


@router.post("/tests", response_model=PsychometricTestResponse, status_code=status.HTTP_201_CREATED)
async def create_test(
        test_in: PsychometricTestCreate,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    try:
        return await psychometric_service.create_test(test_in.model_dump())
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating psychometric test: {str(e)}"
        )


@router.put("/tests/{test_id}", response_model=PsychometricTestResponse)
async def update_test(
        test_id: int,
        test_in: PsychometricTestUpdate,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    try:
        return await psychometric_service.update_test(test_id, test_in.model_dump(exclude_unset=True))
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error updating psychometric test: {str(e)}"
        )


@router.delete("/tests/{test_id}")
async def delete_test(test_id: int, session: Session = Depends(requires_role(*HR_ROLES))):
    try:
        await psychometric_service.delete_test(test_id)
        return {"message": "Psychometric test deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error deleting psychometric test: {str(e)}"
        )


@router.get("/tests/{test_id}/questions", response_model=List[PsychometricQuestionResponse])
async def get_questions(test_id: int):
    try:
        return await psychometric_service.get_questions(test_id)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching psychometric questions: {str(e)}"
        )


@router.post("/questions", response_model=PsychometricQuestionResponse, status_code=status.HTTP_201_CREATED)
async def create_question(
        question_in: PsychometricQuestionCreate,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    """
    Add a question to a test.

    The order doubles as the question's key within its test: a second
    question at the same order is rejected with 409.
    """
    try:
        return await psychometric_service.create_question(question_in.model_dump())
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating psychometric question: {str(e)}"
        )


@router.get("/attempts", response_model=List[PsychometricAttemptResponse])
async def get_attempts(
        test_id: Optional[int] = None,
        candidate_email: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    """
    Candidate attempts, newest first.

    Args:
        test_id: Filter by test
        candidate_email: Filter by candidate
        skip: Number of records to skip
        limit: Maximum number of records to return
        session: Caller's session

    Returns:
        List of attempts
    """
    try:
        return await psychometric_service.get_attempts(test_id, candidate_email, skip, limit)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching psychometric test attempts: {str(e)}"
        )


@router.get("/candidates", response_model=List[PsychometricAttemptResponse])
async def get_candidates(session: Session = Depends(requires_role(*HR_ROLES))):
    """Everyone who has taken a test, as their attempts, newest first."""
    try:
        return await psychometric_service.get_attempts()
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching candidates: {str(e)}"
        )


@router.get("/attempts/{attempt_id}", response_model=PsychometricAttemptResponse)
async def get_attempt(attempt_id: int):
    try:
        return await psychometric_service.get_attempt(attempt_id)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching psychometric test attempt: {str(e)}"
        )


@router.post("/attempts", response_model=PsychometricAttemptResponse, status_code=status.HTTP_201_CREATED)
async def create_attempt(attempt_in: PsychometricAttemptCreate):
    """
    Submit a candidate's answers; the attempt is scored on arrival.

    Returns:
        Stored attempt with scores and recommendations
    """
    try:
        return await psychometric_service.create_attempt(attempt_in.model_dump())
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating psychometric test attempt: {str(e)}"
        )


@router.get("/stats", response_model=PsychometricStats)
async def get_stats(session: Session = Depends(requires_role(*HR_ROLES))):
    try:
        return await psychometric_service.get_dashboard_stats()
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching psychometric stats: {str(e)}"
        )
