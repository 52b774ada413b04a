"""
Employee service for business logic.
"""
from typing import Dict, List, Optional, Any
from fastapi import HTTPException, status

from hrportal.domains.employees.repository import EmployeeRepository
from hrportal.domains.users.service import user_service
from hrportal.models.employee import EmployeeModel
from hrportal.utils.id_handler import IdHandler


class EmployeeService:
    """
    Service for employee-related business logic.
    """

    def __init__(self, employee_repo: Optional[EmployeeRepository] = None, users=None):
        """
        Initialize with employee repository.

        Args:
            employee_repo: Optional employee repository instance
            users: Optional user service, defaults to the shared one
        """
        self.employee_repo = employee_repo or EmployeeRepository()
        self.users = users or user_service

    async def get_employees(
            self,
            skip: int = 0,
            limit: int = 100,
            onboarding_status: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Get employees together with their user accounts.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
            onboarding_status: Filter by onboarding status

        Returns:
            List of employee documents each carrying a user dict
        """
        query = {}
        if onboarding_status:
            query["onboarding_status"] = onboarding_status

        employees = await self.employee_repo.find_many(query, skip, limit)

        result = []
        for employee in employees:
            result.append(await self._with_user(employee))
        return result

    async def get_employee(self, employee_id: Any) -> Dict[str, Any]:
        employee = await self.employee_repo.find_by_id(employee_id)
        IdHandler.raise_if_not_found(employee, "Employee not found")
        return await self._with_user(employee)

    async def create_employee(self, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an employee record for an existing user.

        Raises:
            HTTPException: If the user is unknown or already has a record,
                or the employee number is taken
        """
        user = await self.users.get_user_by_id(employee_data["user_id"])
        IdHandler.raise_if_not_found(user, "User not found", status.HTTP_400_BAD_REQUEST)

        if await self.employee_repo.find_by_user_id(user["_id"]):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User already has an employee record"
            )
        if await self.employee_repo.find_by_employee_number(employee_data["employee_id"]):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Employee ID {employee_data['employee_id']} is already in use"
            )

        employee_data["user_id"] = user["_id"]
        record = EmployeeModel(**employee_data).model_dump(exclude={"id"})
        employee = await self.employee_repo.create(record)
        return {**employee, "user": user}

    async def update_onboarding_progress(self, employee_id: Any, progress: int) -> Dict[str, Any]:
        """
        Record onboarding progress; 100 marks onboarding completed.

        Args:
            employee_id: Employee ID
            progress: Percentage between 0 and 100

        Returns:
            Updated employee document with its user
        """
        progress = max(0, min(100, progress))
        if progress >= 100:
            onboarding_status = "completed"
        elif progress > 0:
            onboarding_status = "in_progress"
        else:
            onboarding_status = "not_started"

        employee = await self.employee_repo.update(employee_id, {
            "onboarding_progress": progress,
            "onboarding_status": onboarding_status,
        })
        IdHandler.raise_if_not_found(employee, "Employee not found")
        return await self._with_user(employee)

    async def _with_user(self, employee: Dict[str, Any]) -> Dict[str, Any]:
        user = None
        if employee.get("user_id"):
            user = await self.users.get_user_by_id(employee["user_id"])
        return {**employee, "user": user or {}}


# Create global instance
employee_service = EmployeeService()
