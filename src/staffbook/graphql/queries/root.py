"""
Root GraphQL query definitions
"""

import strawberry

from ..context import get_services_from_info
from ..types.employee import Employee, employee_from_model
from ..types.response import AuthResponse


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def hello(self) -> str:
        """Smoke-test field."""
        return "GraphQL is working!"

    @strawberry.field
    async def login(
        self,
        info: strawberry.Info,
        username: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> AuthResponse:
        """Verify credentials by username or email."""
        from ..resolvers.auth import login

        result = await login(get_services_from_info(info), username, email, password)
        return AuthResponse.from_result(result)

    @strawberry.field(name="getAllEmployees")
    async def get_all_employees(self, info: strawberry.Info) -> list[Employee]:
        """Get every employee."""
        from ..resolvers.employee import get_all_employees

        employees = await get_all_employees(get_services_from_info(info))
        return [employee_from_model(employee) for employee in employees]

    @strawberry.field(name="getEmployeeById")
    async def get_employee_by_id(
        self, info: strawberry.Info, eid: strawberry.ID
    ) -> Employee | None:
        """Get an employee by ID."""
        from ..resolvers.employee import get_employee_by_id

        employee = await get_employee_by_id(get_services_from_info(info), eid)
        return employee_from_model(employee) if employee else None

    @strawberry.field(name="searchEmployees")
    async def search_employees(
        self,
        info: strawberry.Info,
        designation: str | None = None,
        department: str | None = None,
    ) -> list[Employee]:
        """Search employees by designation and/or department."""
        from ..resolvers.employee import search_employees

        employees = await search_employees(get_services_from_info(info), designation, department)
        return [employee_from_model(employee) for employee in employees]
