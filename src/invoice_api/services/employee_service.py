"""Employee service for managing employee records."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from invoice_api.exceptions import EmployeeEmailExistsError, EmployeeNotFoundError
from invoice_api.models.dto.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from invoice_api.models.orm.employee import EmployeeORM
from invoice_api.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for employee CRUD operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)

    @staticmethod
    def _build_response(employee: EmployeeORM) -> EmployeeResponse:
        return EmployeeResponse(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            full_name=employee.full_name,
            email=employee.email,
            phone_number=employee.phone_number,
            department=employee.department,
            position=employee.position,
            salary=employee.salary,
            hire_date=employee.hire_date,
        )

    async def list_employees(self, offset: int = 0, limit: int = 100) -> list[EmployeeResponse]:
        """List employees ordered by ID."""
        employees = await self.employee_repo.get_all(offset=offset, limit=limit)
        return [self._build_response(e) for e in employees]

    async def get_employee(self, employee_id: int) -> EmployeeResponse:
        """Get a single employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return self._build_response(employee)

    async def _ensure_email_free(self, email: str, employee_id: int | None = None) -> None:
        existing = await self.employee_repo.get_by_email(email)
        if existing is not None and existing.id != employee_id:
            raise EmployeeEmailExistsError(email)

    async def create_employee(self, data: EmployeeCreate) -> EmployeeResponse:
        """Create an employee.

        Raises:
            EmployeeEmailExistsError: If another employee has the email
        """
        email = data.email.lower()
        await self._ensure_email_free(email)

        employee = await self.employee_repo.create(
            first_name=data.first_name,
            last_name=data.last_name,
            email=email,
            phone_number=data.phone_number,
            department=data.department,
            position=data.position,
            salary=data.salary,
            hire_date=data.hire_date,
        )
        await self.session.commit()
        logger.info("Created employee %s", employee.id)
        return self._build_response(employee)

    async def update_employee(self, employee_id: int, data: EmployeeUpdate) -> EmployeeResponse:
        """Update an employee's details.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            EmployeeEmailExistsError: If another employee has the email
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        email = data.email.lower()
        await self._ensure_email_free(email, employee_id)

        employee = await self.employee_repo.update(
            employee,
            first_name=data.first_name,
            last_name=data.last_name,
            email=email,
            phone_number=data.phone_number,
            department=data.department,
            position=data.position,
            salary=data.salary,
        )
        await self.session.commit()
        logger.info("Updated employee %s", employee_id)
        return self._build_response(employee)

    async def delete_employee(self, employee_id: int) -> None:
        """Delete an employee together with their contracts and invoices.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        await self.employee_repo.delete(employee)
        await self.session.commit()
        logger.info("Deleted employee %s", employee_id)
