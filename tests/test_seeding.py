"""Tests for demo data seeding."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from invoice_api.services.seeding_service import SEED_EMPLOYEES, DataSeedingService, _shift_years

from factories import make_employee_orm


class TestShiftYears:
    """Tests for _shift_years."""

    def test_regular_day(self):
        assert _shift_years(date(2024, 6, 17), -3) == date(2021, 6, 17)

    def test_leap_day_into_common_year(self):
        assert _shift_years(date(2024, 2, 29), 2) == date(2026, 2, 28)


class TestDataSeedingService:
    """Tests for DataSeedingService."""

    @pytest.mark.asyncio
    async def test_skips_when_employees_exist(self):
        service = DataSeedingService(AsyncMock())
        service.employee_repo = AsyncMock()
        service.contract_repo = AsyncMock()
        service.employee_repo.count.return_value = 3

        assert await service.seed_if_empty() is False
        service.employee_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_seeds_employee_with_two_year_contract(self):
        session = AsyncMock()
        service = DataSeedingService(session)
        service.employee_repo = AsyncMock()
        service.contract_repo = AsyncMock()
        service.employee_repo.count.return_value = 0
        service.employee_repo.create.return_value = make_employee_orm(id=1)

        assert await service.seed_if_empty(today=date(2024, 6, 17)) is True

        assert service.employee_repo.create.await_count == len(SEED_EMPLOYEES)
        assert service.contract_repo.create.await_count == len(SEED_EMPLOYEES)
        first_contract = service.contract_repo.create.await_args_list[0].kwargs
        assert first_contract["start_date"] == date(2018, 6, 17)
        assert first_contract["end_date"] == date(2020, 6, 17)
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_default_reference_date_is_utc_today(self, monkeypatch):
        monkeypatch.setattr(
            "invoice_api.services.seeding_service.utc_today", lambda: date(2024, 6, 17)
        )
        service = DataSeedingService(AsyncMock())
        service.employee_repo = AsyncMock()
        service.contract_repo = AsyncMock()
        service.employee_repo.count.return_value = 0
        service.employee_repo.create.return_value = make_employee_orm(id=1)

        await service.seed_if_empty()

        first_employee = service.employee_repo.create.await_args_list[0].kwargs
        assert first_employee["hire_date"] == date(2018, 6, 17)
