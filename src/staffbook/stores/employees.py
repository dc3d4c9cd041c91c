"""Store helpers for the employees collection."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import date
from uuid import UUID

from sqlalchemy import select

from ..database.connection import Database
from ..dbmodels import Employees, utcnow


def parse_employee_id(eid: str | UUID | None) -> UUID | None:
    """Parse an employee identifier, returning None when it is malformed."""
    if isinstance(eid, UUID):
        return eid
    if not eid:
        return None
    try:
        return UUID(str(eid))
    except ValueError:
        return None


@dataclass(frozen=True)
class NewEmployee:
    first_name: str
    last_name: str
    designation: str
    salary: float
    date_of_joining: date
    department: str
    email: str | None = None
    gender: str | None = None
    employee_photo: str | None = None

    def to_model(self) -> Employees:
        return Employees(**asdict(self))


@dataclass(frozen=True)
class EmployeeUpdate:
    """Partial update for an employee; None means "leave unchanged"."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    gender: str | None = None
    designation: str | None = None
    salary: float | None = None
    date_of_joining: date | None = None
    department: str | None = None
    employee_photo: str | None = None

    def supplied(self) -> dict[str, object]:
        values = ((f.name, getattr(self, f.name)) for f in fields(self))
        return {name: value for name, value in values if value is not None}

    def is_empty(self) -> bool:
        return not self.supplied()

    def apply_to(self, employee: Employees) -> Employees:
        """Overwrite the supplied fields on ``employee``; the rest keep their values."""
        for name, value in self.supplied().items():
            setattr(employee, name, value)
        employee.updated_at = utcnow()
        return employee


class EmployeeStore:
    def __init__(self, database: Database) -> None:
        self._database = database

    async def list_all(self) -> list[Employees]:
        async with self._database.session() as session:
            result = await session.execute(select(Employees).order_by(Employees.created_at))
            return list(result.scalars().all())

    async def get(self, employee_id: UUID) -> Employees | None:
        async with self._database.session() as session:
            return await session.get(Employees, employee_id)

    async def search(
        self, *, designation: str | None = None, department: str | None = None
    ) -> list[Employees]:
        """Exact-match filter; every given filter must match."""
        stmt = select(Employees)
        if designation:
            stmt = stmt.where(Employees.designation == designation)
        if department:
            stmt = stmt.where(Employees.department == department)

        async with self._database.session() as session:
            result = await session.execute(stmt.order_by(Employees.created_at))
            return list(result.scalars().all())

    async def create(self, new_employee: NewEmployee) -> Employees:
        employee = new_employee.to_model()
        async with self._database.session() as session:
            session.add(employee)
            await session.flush()
            await session.refresh(employee)
        return employee

    async def update(self, employee_id: UUID, changes: EmployeeUpdate) -> Employees | None:
        async with self._database.session() as session:
            employee = await session.get(Employees, employee_id)
            if employee is None:
                return None
            changes.apply_to(employee)
            await session.flush()
            await session.refresh(employee)
        return employee

    async def delete(self, employee_id: UUID) -> Employees | None:
        """Delete an employee and return the record as it was before removal."""
        async with self._database.session() as session:
            employee = await session.get(Employees, employee_id)
            if employee is None:
                return None
            await session.delete(employee)
        return employee
