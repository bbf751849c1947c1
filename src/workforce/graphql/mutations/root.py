"""
Root GraphQL mutation definitions
"""

from typing import Any

import strawberry

from ..types.employee import Employee
from ..types.user import User


def _supplied(**fields: Any) -> dict[str, Any]:
    """Keep only the arguments the client actually sent."""
    return {name: value for name, value in fields.items() if value is not None}


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation
    async def signup(
        self,
        username: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        """Register a new user."""
        from ..resolvers.auth import signup

        return await signup(username, email, password)

    # Employee mutations
    @strawberry.mutation(name="addEmployee")
    async def add_employee(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        gender: str | None = None,
        designation: str | None = None,
        salary: float | None = None,
        date_of_joining: str | None = None,
        department: str | None = None,
        employee_photo: str | None = None,
    ) -> Employee:
        """Create a new employee."""
        from ..resolvers.employee import add_employee

        return await add_employee(
            _supplied(
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
        )

    @strawberry.mutation(name="updateEmployee")
    async def update_employee(
        self,
        id: strawberry.ID | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        gender: str | None = None,
        designation: str | None = None,
        salary: float | None = None,
        date_of_joining: str | None = None,
        department: str | None = None,
        employee_photo: str | None = None,
    ) -> Employee | None:
        """Update the supplied fields of an existing employee."""
        from ..resolvers.employee import update_employee

        return await update_employee(
            id,
            _supplied(
                first_name=first_name,
                last_name=last_name,
                email=email,
                gender=gender,
                designation=designation,
                salary=salary,
                date_of_joining=date_of_joining,
                department=department,
                employee_photo=employee_photo,
            ),
        )

    @strawberry.mutation(name="deleteEmployee")
    async def delete_employee(self, id: strawberry.ID | None = None) -> str:
        """Delete an employee; returns a status message."""
        from ..resolvers.employee import delete_employee

        return await delete_employee(id)
