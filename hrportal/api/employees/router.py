"""
Employee API routes for the directory.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status

from hrportal.core.permissions import HR_ROLES, Session, UserRole, requires_role
from hrportal.domains.employees.service import employee_service
from hrportal.schemas.employee import EmployeeCreate, OnboardingProgressUpdate
from hrportal.views.employee_card import EmployeeCard, build_employee_card

router = APIRouter()

DIRECTORY_ROLES = (*HR_ROLES, UserRole.TEAM_LEAD)


@router.get("/cards", response_model=List[EmployeeCard])
async def get_employee_cards(
        skip: int = 0,
        limit: int = 100,
        onboarding_status: Optional[str] = None,
        session: Session = Depends(requires_role(*DIRECTORY_ROLES))
):
    """
    Directory cards for employees.

    Args:
        skip: Number of records to skip
        limit: Maximum number of records to return
        onboarding_status: Filter by onboarding status
        session: Caller's session

    Returns:
        List of employee cards
    """
    try:
        employees = await employee_service.get_employees(skip, limit, onboarding_status)
        return [build_employee_card(employee, employee["user"]) for employee in employees]
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching employees: {str(e)}"
        )


@router.get("/{employee_id}/card", response_model=EmployeeCard)
async def get_employee_card(
        employee_id: int,
        session: Session = Depends(requires_role(*DIRECTORY_ROLES))
):
    try:
        employee = await employee_service.get_employee(employee_id)
        return build_employee_card(employee, employee["user"])
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching employee: {str(e)}"
        )


@router.post("/", response_model=EmployeeCard, status_code=status.HTTP_201_CREATED)
async def create_employee(
        employee_in: EmployeeCreate,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    try:
        employee = await employee_service.create_employee(employee_in.model_dump())
        return build_employee_card(employee, employee["user"])
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating employee: {str(e)}"
        )


@router.put("/{employee_id}/onboarding-progress", response_model=EmployeeCard)
async def update_onboarding_progress(
        employee_id: int,
        update: OnboardingProgressUpdate,
        session: Session = Depends(requires_role(*HR_ROLES))
):
    try:
        employee = await employee_service.update_onboarding_progress(employee_id, update.progress)
        return build_employee_card(employee, employee["user"])
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error updating onboarding progress: {str(e)}"
        )
