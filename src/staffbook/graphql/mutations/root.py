"""
Root GraphQL mutation definitions
"""

from datetime import date

import strawberry

from ...stores.employees import EmployeeUpdate, NewEmployee
from ..context import get_services_from_info
from ..types.response import AuthResponse, EmployeeResponse


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Auth mutations
    @strawberry.mutation
    async def signup(
        self, info: strawberry.Info, username: str, email: str, password: str
    ) -> AuthResponse:
        """Create a new user account."""
        from ..resolvers.auth import signup

        result = await signup(get_services_from_info(info), username, email, password)
        return AuthResponse.from_result(result)

    # Employee mutations
    @strawberry.mutation(name="addNewEmployee")
    async def add_new_employee(
        self,
        info: strawberry.Info,
        first_name: str,
        last_name: str,
        designation: str,
        salary: float,
        date_of_joining: date,
        department: str,
        email: str | None = None,
        gender: str | None = None,
        employee_photo: str | None = None,
    ) -> EmployeeResponse:
        """Create a new employee."""
        from ..resolvers.employee import add_new_employee

        new_employee = NewEmployee(
            first_name=first_name,
            last_name=last_name,
            email=email,
            gender=gender,
            designation=designation,
            salary=salary,
            date_of_joining=date_of_joining,
            department=department,
            employee_photo=employee_photo,
        )
        result = await add_new_employee(get_services_from_info(info), new_employee)
        return EmployeeResponse.from_result(result)

    @strawberry.mutation(name="updateEmployeeById")
    async def update_employee_by_id(
        self,
        info: strawberry.Info,
        eid: strawberry.ID,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        gender: str | None = None,
        designation: str | None = None,
        salary: float | None = None,
        date_of_joining: date | None = None,
        department: str | None = None,
        employee_photo: str | None = None,
    ) -> EmployeeResponse:
        """Update the supplied fields of an existing employee."""
        from ..resolvers.employee import update_employee_by_id

        changes = EmployeeUpdate(
            first_name=first_name,
            last_name=last_name,
            email=email,
            gender=gender,
            designation=designation,
            salary=salary,
            date_of_joining=date_of_joining,
            department=department,
            employee_photo=employee_photo,
        )
        result = await update_employee_by_id(get_services_from_info(info), eid, changes)
        return EmployeeResponse.from_result(result)

    @strawberry.mutation(name="deleteEmployeeById")
    async def delete_employee_by_id(
        self, info: strawberry.Info, eid: strawberry.ID
    ) -> EmployeeResponse:
        """Delete an employee, returning the removed record."""
        from ..resolvers.employee import delete_employee_by_id

        result = await delete_employee_by_id(get_services_from_info(info), eid)
        return EmployeeResponse.from_result(result)
