"""
Envelope types returned by mutations and the login query
"""

from typing import TYPE_CHECKING

import strawberry

from ...results import Failure, Success
from .employee import Employee, employee_from_model
from .user import User, user_from_model

if TYPE_CHECKING:
    from ...dbmodels import Employees, Users
    from ...results import Result


@strawberry.type
class AuthResponse:
    success: bool
    message: str
    user: User | None = None

    @classmethod
    def from_result(cls, result: "Result[Users]") -> "AuthResponse":
        if isinstance(result, Success):
            return cls(success=True, message=result.message, user=user_from_model(result.value))
        if isinstance(result, Failure):
            return cls(success=False, message=result.message)
        raise TypeError(f"Unexpected result type: {type(result).__name__}")


@strawberry.type
class EmployeeResponse:
    success: bool
    message: str
    employee: Employee | None = None

    @classmethod
    def from_result(cls, result: "Result[Employees]") -> "EmployeeResponse":
        if isinstance(result, Success):
            return cls(
                success=True,
                message=result.message,
                employee=employee_from_model(result.value),
            )
        if isinstance(result, Failure):
            return cls(success=False, message=result.message)
        raise TypeError(f"Unexpected result type: {type(result).__name__}")
