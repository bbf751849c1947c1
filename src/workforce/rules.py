"""
Input rules applied by mutations before anything is written.

Each validator checks its rules in a fixed order and raises ValidationError
on the first failure.
"""

from __future__ import annotations

from typing import Any, cast

from .errors import ValidationError

MIN_PASSWORD_LENGTH = 6
MIN_SALARY = 1000

ALL_FIELDS_REQUIRED = "All fields are required."
INVALID_EMAIL = "Invalid email format."
PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
SALARY_TOO_LOW = f"Salary must be at least {MIN_SALARY}."
EMPLOYEE_ID_REQUIRED = "Employee ID is required."


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return True


def _check_email(email: str) -> None:
    if "@" not in email:
        raise ValidationError(INVALID_EMAIL)


def _check_salary(salary: float) -> None:
    if salary < MIN_SALARY:
        raise ValidationError(SALARY_TOO_LOW)


def validate_signup(
    username: str | None, email: str | None, password: str | None
) -> tuple[str, str, str]:
    """Return the credentials once every rule has passed."""
    if not all(_is_present(v) for v in (username, email, password)):
        raise ValidationError(ALL_FIELDS_REQUIRED)
    username, email, password = cast(str, username), cast(str, email), cast(str, password)
    _check_email(email)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(PASSWORD_TOO_SHORT)
    return username, email, password


def validate_new_employee(
    *,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    designation: str | None,
    salary: float | None,
    department: str | None,
) -> None:
    required = (first_name, last_name, email, designation, salary, department)
    if not all(_is_present(v) for v in required):
        raise ValidationError(ALL_FIELDS_REQUIRED)
    _check_email(cast(str, email))
    _check_salary(cast(float, salary))


def validate_employee_update(
    employee_id: str | None, *, email: str | None = None, salary: float | None = None
) -> str:
    """Only the fields actually supplied are checked. Returns the employee ID."""
    employee_id = validate_employee_id(employee_id)
    if email is not None:
        _check_email(email)
    if salary is not None:
        _check_salary(salary)
    return employee_id


def validate_employee_id(employee_id: str | None) -> str:
    if not _is_present(employee_id):
        raise ValidationError(EMPLOYEE_ID_REQUIRED)
    return cast(str, employee_id)
