"""Tests for repository queries."""

from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from invoice_api.repositories.invoice_repository import InvoiceRepository


def session_returning(value) -> AsyncMock:
    result = MagicMock()
    result.scalar_one.return_value = value
    session = AsyncMock()
    session.execute.return_value = result
    return session


def compiled_statement(session: AsyncMock):
    statement = session.execute.await_args.args[0]
    return statement.compile(dialect=postgresql.dialect())


class TestCountCreatedOn:
    """Tests for InvoiceRepository.count_created_on."""

    @pytest.mark.asyncio
    async def test_returns_count(self):
        session = session_returning(3)

        assert await InvoiceRepository(session).count_created_on(date(2024, 6, 17)) == 3

    @pytest.mark.asyncio
    async def test_queries_half_open_utc_day(self):
        """The window starts at UTC midnight and stops before the next one."""
        session = session_returning(0)

        await InvoiceRepository(session).count_created_on(date(2024, 6, 17))

        compiled = compiled_statement(session)
        sql = str(compiled)
        bounds = sorted(v for v in compiled.params.values() if isinstance(v, datetime))
        assert "invoices.created_at >=" in sql
        assert "invoices.created_at <" in sql
        assert "invoices.created_at <=" not in sql
        assert bounds == [
            datetime(2024, 6, 17, tzinfo=timezone.utc),
            datetime(2024, 6, 18, tzinfo=timezone.utc),
        ]

    @pytest.mark.asyncio
    async def test_window_crosses_month_end(self):
        session = session_returning(0)

        await InvoiceRepository(session).count_created_on(date(2024, 2, 29))

        compiled = compiled_statement(session)
        bounds = sorted(v for v in compiled.params.values() if isinstance(v, datetime))
        assert bounds[1] == datetime(2024, 3, 1, tzinfo=timezone.utc)


class TestGetForUpdate:
    """Tests for InvoiceRepository.get_for_update."""

    @pytest.mark.asyncio
    async def test_locks_row_and_overwrites_loaded_state(self):
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        session = AsyncMock()
        session.execute.return_value = result

        assert await InvoiceRepository(session).get_for_update(5) is None

        statement = session.execute.await_args.args[0]
        assert "FOR UPDATE" in str(statement.compile(dialect=postgresql.dialect()))
        assert statement.get_execution_options()["populate_existing"] is True
