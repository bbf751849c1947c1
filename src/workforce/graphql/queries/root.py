"""
Root GraphQL query definitions
"""

from typing import Annotated

import strawberry

from ..types.employee import Employee


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="getAllEmployees")
    async def get_all_employees(self) -> list[Employee]:
        """Get every employee."""
        from ..resolvers.employee import resolve_all_employees

        return await resolve_all_employees()

    @strawberry.field(name="getEmployeeById")
    async def get_employee_by_id(self, id: strawberry.ID) -> Employee | None:
        """Get an employee by ID."""
        from ..resolvers.employee import resolve_employee_by_id

        return await resolve_employee_by_id(id)

    @strawberry.field(name="searchEmployees")
    async def search_employees(
        self, search_term: Annotated[str, strawberry.argument(name="searchTerm")]
    ) -> list[Employee]:
        """Search employees by department or designation (case-insensitive)."""
        from ..resolvers.employee import search_employees

        return await search_employees(search_term)

    @strawberry.field(name="searchEmployeesByDeptOrDesignation")
    async def search_employees_by_dept_or_designation(
        self, department: str | None = None, designation: str | None = None
    ) -> list[Employee]:
        """Get employees matching an exact department and/or designation."""
        from ..resolvers.employee import filter_employees

        return await filter_employees(department, designation)

    @strawberry.field
    async def login(self, username: str | None = None, password: str | None = None) -> str:
        """Check credentials; returns a status message."""
        from ..resolvers.auth import login

        return await login(username, password)
