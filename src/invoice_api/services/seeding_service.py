"""Demo data seeding for development databases."""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from invoice_api.models.domain.contract import ContractType, PayGrade
from invoice_api.models.orm.contract import ContractORM
from invoice_api.models.orm.employee import EmployeeORM
from invoice_api.models.orm.invoice import InvoiceORM
from invoice_api.models.orm.invoice_sequence import InvoiceSequenceORM
from invoice_api.repositories.contract_repository import ContractRepository
from invoice_api.repositories.employee_repository import EmployeeRepository
from invoice_api.validation.contract_period import utc_today

logger = logging.getLogger(__name__)

# (first, last, email, phone, department, position, salary, years employed,
#  daily rate, pay grade, contract type)
SEED_EMPLOYEES = [
    ("Robert", "Wilson", "robert.wilson@example.com", "111-222-3333", "Management",
     "Project Manager", Decimal("85000"), 6, Decimal("600"), PayGrade.EXPERT, ContractType.FULL_TIME),
    ("John", "Doe", "john.doe@example.com", "123-456-7890", "IT",
     "Senior Developer", Decimal("75000"), 5, Decimal("500"), PayGrade.EXPERT, ContractType.FULL_TIME),
    ("Jane", "Smith", "jane.smith@example.com", "098-765-4321", "Marketing",
     "Marketing Specialist", Decimal("65000"), 3, Decimal("400"), PayGrade.SENIOR, ContractType.FULL_TIME),
    ("Mike", "Johnson", "mike.johnson@example.com", "555-555-5555", "Sales",
     "Sales Representative", Decimal("60000"), 1, Decimal("300"), PayGrade.INTERMEDIATE, ContractType.CONTRACT),
]


def _shift_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=day.year + years, day=28)


class DataSeedingService:
    """Seeds a handful of employees, each with one two-year contract from their hire date.

    Seeded contracts start in the past, so they are written directly through
    the repositories rather than through ContractService.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)
        self.contract_repo = ContractRepository(session)

    async def seed_if_empty(self, today: date | None = None) -> bool:
        """Seed demo data unless employees already exist.

        Returns:
            True if data was seeded
        """
        if await self.employee_repo.count() > 0:
            logger.info("Database already contains employees, skipping seed")
            return False

        today = today or utc_today()
        for (first, last, email, phone, department, position, salary, years,
             rate, pay_grade, contract_type) in SEED_EMPLOYEES:
            hire_date = _shift_years(today, -years)
            employee = await self.employee_repo.create(
                first_name=first,
                last_name=last,
                email=email,
                phone_number=phone,
                department=department,
                position=position,
                salary=salary,
                hire_date=hire_date,
            )
            await self.contract_repo.create(
                employee_id=employee.id,
                start_date=hire_date,
                end_date=_shift_years(hire_date, 2),
                daily_rate=rate,
                pay_grade=pay_grade,
                contract_type=contract_type,
            )

        await self.session.commit()
        logger.info("Seeded %d employees with contracts", len(SEED_EMPLOYEES))
        return True

    async def clear_all_data(self) -> None:
        """Remove all invoices, contracts, counters and employees."""
        logger.info("Clearing existing data")
        # Order respects foreign keys
        for model in (InvoiceORM, InvoiceSequenceORM, ContractORM, EmployeeORM):
            await self.session.execute(delete(model))
        await self.session.commit()
