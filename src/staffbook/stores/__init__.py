"""
Collection stores for users and employees
"""

from .employees import EmployeeStore, EmployeeUpdate, NewEmployee, parse_employee_id
from .users import DuplicateUserError, UserStore

__all__ = [
    "DuplicateUserError",
    "EmployeeStore",
    "EmployeeUpdate",
    "NewEmployee",
    "UserStore",
    "parse_employee_id",
]
