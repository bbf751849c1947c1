"""
Employee query and mutation resolvers
"""

from __future__ import annotations

from typing import Any

from ... import repository
from ...database.connection import session_scope
from ...logging import get_logger
from ...rules import validate_employee_id, validate_employee_update, validate_new_employee
from ..types.employee import Employee

logger = get_logger(__name__)

EMPLOYEE_DELETED = "Employee deleted successfully"
EMPLOYEE_NOT_FOUND = "Employee not found!"


# Query resolvers
async def resolve_all_employees() -> list[Employee]:
    async with session_scope() as session:
        employees = await repository.list_employees(session)
        return [Employee.from_model(e) for e in employees]


async def resolve_employee_by_id(employee_id: str) -> Employee | None:
    """Resolve an employee by ID; None when no employee has that ID."""
    async with session_scope() as session:
        employee = await repository.get_employee(session, employee_id)
        if employee is None:
            logger.info("Employee not found", employee_id=employee_id)
            return None
        return Employee.from_model(employee)


async def search_employees(search_term: str) -> list[Employee]:
    """Search employees by department or designation (case-insensitive substring)."""
    async with session_scope() as session:
        employees = await repository.search_employees(session, search_term)
        logger.debug("Employee search", search_term=search_term, matches=len(employees))
        return [Employee.from_model(e) for e in employees]


async def filter_employees(
    department: str | None = None, designation: str | None = None
) -> list[Employee]:
    """Exact-match filter on department and/or designation."""
    async with session_scope() as session:
        employees = await repository.filter_employees(
            session, department=department, designation=designation
        )
        return [Employee.from_model(e) for e in employees]


# Mutation resolvers
async def add_employee(fields: dict[str, Any]) -> Employee:
    """Validate and persist a new employee."""
    validate_new_employee(
        first_name=fields.get("first_name"),
        last_name=fields.get("last_name"),
        email=fields.get("email"),
        designation=fields.get("designation"),
        salary=fields.get("salary"),
        department=fields.get("department"),
    )

    async with session_scope() as session:
        employee = await repository.create_employee(session, **fields)
        result = Employee.from_model(employee)

    logger.info("Employee created", employee_id=result.id, department=result.department)
    return result


async def update_employee(employee_id: str | None, fields: dict[str, Any]) -> Employee | None:
    """Merge the supplied fields into an employee.

    ``fields`` must contain only the values the caller actually supplied;
    anything absent is left unchanged. Returns None when the ID does not resolve.
    """
    employee_id = validate_employee_update(
        employee_id, email=fields.get("email"), salary=fields.get("salary")
    )

    async with session_scope() as session:
        employee = await repository.update_employee(session, employee_id, fields)
        if employee is None:
            logger.info("Employee not found for update", employee_id=employee_id)
            return None
        result = Employee.from_model(employee)

    logger.info("Employee updated", employee_id=employee_id, fields=sorted(fields))
    return result


async def delete_employee(employee_id: str | None) -> str:
    """Delete an employee and report the outcome as a status message."""
    employee_id = validate_employee_id(employee_id)

    async with session_scope() as session:
        deleted = await repository.delete_employee(session, employee_id)

    if not deleted:
        logger.info("Employee not found for delete", employee_id=employee_id)
        return EMPLOYEE_NOT_FOUND

    logger.info("Employee deleted", employee_id=employee_id)
    return EMPLOYEE_DELETED
