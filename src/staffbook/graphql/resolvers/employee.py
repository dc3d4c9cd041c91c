from __future__ import annotations

from typing import TYPE_CHECKING

from ...dbmodels import MIN_SALARY
from ...logging import get_logger
from ...results import Failure, Result, Success
from ...stores.employees import EmployeeUpdate, NewEmployee, parse_employee_id

if TYPE_CHECKING:
    from ...context import ServiceContext
    from ...dbmodels import Employees

logger = get_logger(__name__)

SALARY_TOO_LOW = f"Salary must be at least {MIN_SALARY}"
INVALID_EMPLOYEE_ID = "Invalid employee id"
EMPLOYEE_NOT_FOUND = "Employee not found"


# Query resolvers
async def get_all_employees(services: ServiceContext) -> list[Employees]:
    return await services.employees.list_all()


async def get_employee_by_id(services: ServiceContext, eid: str) -> Employees | None:
    """
    Resolve an employee by its ID.

    A malformed id and a missing employee both resolve to None.
    """
    employee_id = parse_employee_id(eid)
    if employee_id is None:
        return None
    return await services.employees.get(employee_id)


async def search_employees(
    services: ServiceContext,
    designation: str | None = None,
    department: str | None = None,
) -> list[Employees]:
    """Filter employees by designation and/or department. No filter means no results."""
    if not designation and not department:
        return []
    return await services.employees.search(designation=designation, department=department)


# Mutation resolvers
async def add_new_employee(
    services: ServiceContext, new_employee: NewEmployee
) -> Result[Employees]:
    if new_employee.salary < MIN_SALARY:
        return Failure(SALARY_TOO_LOW)

    employee = await services.employees.create(new_employee)
    logger.info("Employee created", employee_id=str(employee.id))
    return Success(employee, "Employee created successfully")


async def update_employee_by_id(
    services: ServiceContext, eid: str, changes: EmployeeUpdate
) -> Result[Employees]:
    if changes.salary is not None and changes.salary < MIN_SALARY:
        return Failure(SALARY_TOO_LOW)

    employee_id = parse_employee_id(eid)
    if employee_id is None:
        return Failure(INVALID_EMPLOYEE_ID)

    employee = await services.employees.update(employee_id, changes)
    if employee is None:
        logger.info("Employee not found for update", employee_id=str(employee_id))
        return Failure(EMPLOYEE_NOT_FOUND)

    logger.info(
        "Employee updated",
        employee_id=str(employee_id),
        fields=sorted(changes.supplied()),
    )
    return Success(employee, "Employee updated successfully")


async def delete_employee_by_id(services: ServiceContext, eid: str) -> Result[Employees]:
    employee_id = parse_employee_id(eid)
    if employee_id is None:
        return Failure(INVALID_EMPLOYEE_ID)

    employee = await services.employees.delete(employee_id)
    if employee is None:
        logger.info("Employee not found for delete", employee_id=str(employee_id))
        return Failure(EMPLOYEE_NOT_FOUND)

    logger.info("Employee deleted", employee_id=str(employee_id))
    return Success(employee, "Employee deleted successfully")
