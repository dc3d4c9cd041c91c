"""
Employee GraphQL type definitions
"""

from datetime import date, datetime
from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Employees


@strawberry.type
class Employee:
    """Employee type for GraphQL API."""

    id: strawberry.ID
    first_name: str
    last_name: str
    email: str | None
    gender: str | None
    designation: str
    salary: float
    date_of_joining: date
    department: str
    employee_photo: str | None
    created_at: datetime
    updated_at: datetime


def employee_from_model(employee: "Employees") -> Employee:
    return Employee(
        id=strawberry.ID(str(employee.id)),
        first_name=employee.first_name,
        last_name=employee.last_name,
        email=employee.email,
        gender=employee.gender,
        designation=employee.designation,
        salary=employee.salary,
        date_of_joining=employee.date_of_joining,
        department=employee.department,
        employee_photo=employee.employee_photo,
        created_at=employee.created_at,
        updated_at=employee.updated_at,
    )
