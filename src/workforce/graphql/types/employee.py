"""
Employee GraphQL type definitions
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...database.models import Employees


@strawberry.type
class Employee:
    """Employee type for GraphQL API."""

    id: strawberry.ID
    first_name: str | None
    last_name: str | None
    email: str | None
    gender: str | None
    designation: str | None
    salary: float | None
    date_of_joining: str | None
    department: str | None
    employee_photo: str | None

    @classmethod
    def from_model(cls, employee: Employees) -> Employee:
        return cls(
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
        )
