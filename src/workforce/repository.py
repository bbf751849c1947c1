"""Repository helpers for the employees and users collections."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from .database.models import EMPLOYEE_FIELDS, Employees, Users
from .errors import InvalidIdError


def parse_id(value: str | UUID) -> UUID:
    """Parse a document identifier, rejecting malformed values."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError) as e:
        raise InvalidIdError(f"Invalid ID format: {value!r}") from e


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# Employees


async def list_employees(session: AsyncSession) -> list[Employees]:
    stmt = select(Employees).order_by(Employees.created_at)
    res = await session.execute(stmt)
    return list(res.scalars().all())


async def get_employee(session: AsyncSession, employee_id: str | UUID) -> Employees | None:
    return await session.get(Employees, parse_id(employee_id))


async def search_employees(session: AsyncSession, term: str) -> list[Employees]:
    """Case-insensitive substring match on department or designation."""
    pattern = f"%{_escape_like(term)}%"
    stmt = (
        select(Employees)
        .where(
            or_(
                Employees.department.ilike(pattern, escape="\\"),
                Employees.designation.ilike(pattern, escape="\\"),
            )
        )
        .order_by(Employees.created_at)
    )
    res = await session.execute(stmt)
    return list(res.scalars().all())


async def filter_employees(
    session: AsyncSession,
    *,
    department: str | None = None,
    designation: str | None = None,
) -> list[Employees]:
    """Exact-match filter; an omitted field imposes no constraint."""
    stmt = select(Employees)
    if department is not None:
        stmt = stmt.where(Employees.department == department)
    if designation is not None:
        stmt = stmt.where(Employees.designation == designation)
    res = await session.execute(stmt.order_by(Employees.created_at))
    return list(res.scalars().all())


async def create_employee(session: AsyncSession, **fields: Any) -> Employees:
    unknown = set(fields) - set(EMPLOYEE_FIELDS)
    if unknown:
        raise TypeError(f"Unknown employee fields: {sorted(unknown)}")
    employee = Employees(**fields)
    session.add(employee)
    await session.flush()
    await session.refresh(employee)
    return employee


async def update_employee(
    session: AsyncSession, employee_id: str | UUID, fields: dict[str, Any]
) -> Employees | None:
    """Merge ``fields`` into an existing employee and return the updated row."""
    employee = await session.get(Employees, parse_id(employee_id))
    if employee is None:
        return None
    for name, value in fields.items():
        if name not in EMPLOYEE_FIELDS:
            raise TypeError(f"Unknown employee field: {name}")
        setattr(employee, name, value)
    await session.flush()
    await session.refresh(employee)
    return employee


async def delete_employee(session: AsyncSession, employee_id: str | UUID) -> bool:
    """Delete an employee; True if a row was removed."""
    stmt = delete(Employees).where(Employees.id == parse_id(employee_id))
    res = await session.execute(stmt)
    return (res.rowcount or 0) > 0


# Users


async def create_user(
    session: AsyncSession, *, username: str, email: str, password_hash: str
) -> Users:
    user = Users(username=username, email=email, password=password_hash)
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


async def get_user_by_username(session: AsyncSession, username: str) -> Users | None:
    stmt = select(Users).where(Users.username == username)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()
