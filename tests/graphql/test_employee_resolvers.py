"""
Tests for employee query and mutation resolvers
"""

import uuid
from dataclasses import replace
from unittest.mock import AsyncMock, MagicMock

import pytest

from staffbook.context import ServiceContext
from staffbook.graphql.resolvers.employee import (
    EMPLOYEE_NOT_FOUND,
    INVALID_EMPLOYEE_ID,
    SALARY_TOO_LOW,
    add_new_employee,
    delete_employee_by_id,
    get_all_employees,
    get_employee_by_id,
    search_employees,
    update_employee_by_id,
)
from staffbook.results import Failure, Success
from staffbook.stores.employees import EmployeeStore, EmployeeUpdate

COMPARED_FIELDS = (
    "id",
    "first_name",
    "last_name",
    "email",
    "gender",
    "designation",
    "salary",
    "date_of_joining",
    "department",
    "employee_photo",
)


@pytest.fixture
def mock_services():
    """Service context whose employee store is a mock."""
    return ServiceContext(
        database=MagicMock(),
        users=AsyncMock(),
        employees=AsyncMock(spec=EmployeeStore),
        hasher=MagicMock(),
    )


def test_salary_message():
    assert SALARY_TOO_LOW == "Salary must be at least 1000"


class TestEmployeeQueries:
    @pytest.mark.asyncio
    async def test_get_all_employees(self, services, new_employee):
        await add_new_employee(services, new_employee)
        await add_new_employee(services, replace(new_employee, first_name="Alan"))

        employees = await get_all_employees(services)

        assert len(employees) == 2

    @pytest.mark.asyncio
    async def test_get_all_employees_empty(self, services):
        assert await get_all_employees(services) == []

    @pytest.mark.asyncio
    async def test_round_trip_by_id(self, services, new_employee):
        created = (await add_new_employee(services, new_employee)).value

        fetched = await get_employee_by_id(services, str(created.id))

        assert fetched is not None
        for field in COMPARED_FIELDS:
            assert getattr(fetched, field) == getattr(created, field), field

    @pytest.mark.asyncio
    async def test_get_by_unknown_id(self, services):
        assert await get_employee_by_id(services, str(uuid.uuid4())) is None

    @pytest.mark.asyncio
    async def test_get_by_malformed_id_skips_store(self, mock_services):
        assert await get_employee_by_id(mock_services, "not-an-id") is None
        mock_services.employees.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_without_filters_returns_nothing(self, services, new_employee):
        await add_new_employee(services, new_employee)

        assert await search_employees(services) == []
        assert await search_employees(services, "", "") == []

    @pytest.mark.asyncio
    async def test_search_without_filters_skips_store(self, mock_services):
        assert await search_employees(mock_services, None, None) == []
        mock_services.employees.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_filters(self, services, new_employee):
        await add_new_employee(services, new_employee)
        await add_new_employee(services, replace(new_employee, first_name="Bob", department="Sales"))

        engineers = await search_employees(services, designation="Engineer")
        research = await search_employees(services, department="R&D")
        both = await search_employees(services, designation="Engineer", department="Sales")

        assert {e.first_name for e in engineers} == {"Ada", "Bob"}
        assert [e.first_name for e in research] == ["Ada"]
        assert [e.first_name for e in both] == ["Bob"]


class TestAddNewEmployee:
    @pytest.mark.asyncio
    async def test_salary_below_floor_rejected(self, mock_services, new_employee):
        result = await add_new_employee(mock_services, replace(new_employee, salary=999))

        assert result == Failure(SALARY_TOO_LOW)
        mock_services.employees.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_salary_at_floor_accepted(self, services, new_employee):
        result = await add_new_employee(services, replace(new_employee, salary=1000))

        assert isinstance(result, Success)
        assert result.message == "Employee created successfully"
        assert result.value.salary == 1000


class TestUpdateEmployeeById:
    @pytest.mark.asyncio
    async def test_partial_update(self, services, new_employee):
        created = (await add_new_employee(services, new_employee)).value

        result = await update_employee_by_id(
            services, str(created.id), EmployeeUpdate(designation="Lead", salary=8000)
        )

        assert isinstance(result, Success)
        assert result.message == "Employee updated successfully"
        assert result.value.designation == "Lead"
        assert result.value.salary == 8000
        assert result.value.first_name == "Ada"
        assert result.value.department == "R&D"

    @pytest.mark.asyncio
    async def test_malformed_id_never_reaches_store(self, mock_services):
        result = await update_employee_by_id(mock_services, "12345", EmployeeUpdate(gender="Male"))

        assert result == Failure(INVALID_EMPLOYEE_ID)
        mock_services.employees.update.assert_not_called()
        mock_services.employees.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_low_salary_checked_first(self, mock_services):
        result = await update_employee_by_id(mock_services, "12345", EmployeeUpdate(salary=10))

        assert result == Failure(SALARY_TOO_LOW)
        mock_services.employees.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_salary_not_checked_when_absent(self, services, new_employee):
        created = (await add_new_employee(services, new_employee)).value

        result = await update_employee_by_id(
            services, str(created.id), EmployeeUpdate(last_name="King")
        )

        assert isinstance(result, Success)
        assert result.value.salary == 5000.0

    @pytest.mark.asyncio
    async def test_unknown_employee(self, services):
        result = await update_employee_by_id(
            services, str(uuid.uuid4()), EmployeeUpdate(salary=2000)
        )

        assert result == Failure(EMPLOYEE_NOT_FOUND)


class TestDeleteEmployeeById:
    @pytest.mark.asyncio
    async def test_delete_returns_snapshot(self, services, new_employee):
        created = (await add_new_employee(services, new_employee)).value

        result = await delete_employee_by_id(services, str(created.id))

        assert isinstance(result, Success)
        assert result.message == "Employee deleted successfully"
        assert result.value.id == created.id
        assert result.value.first_name == "Ada"
        assert await get_employee_by_id(services, str(created.id)) is None

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, mock_services):
        result = await delete_employee_by_id(mock_services, "bogus")

        assert result == Failure(INVALID_EMPLOYEE_ID)
        mock_services.employees.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_unknown(self, services):
        result = await delete_employee_by_id(services, str(uuid.uuid4()))

        assert result == Failure(EMPLOYEE_NOT_FOUND)
