"""Unit tests for mutation input rules."""

import pytest

from workforce.errors import ValidationError
from workforce.rules import (
    validate_employee_id,
    validate_employee_update,
    validate_new_employee,
    validate_signup,
)


def employee_fields(**overrides):
    fields = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "designation": "Engineer",
        "salary": 5000.0,
        "department": "Engineering",
    }
    fields.update(overrides)
    return fields


@pytest.mark.unit
class TestSignupRules:
    def test_valid_signup_returns_credentials(self):
        assert validate_signup("ada", "ada@example.com", "secret123") == (
            "ada",
            "ada@example.com",
            "secret123",
        )

    @pytest.mark.parametrize(
        "username,email,password",
        [
            (None, "ada@example.com", "secret123"),
            ("ada", "", "secret123"),
            ("ada", "ada@example.com", None),
        ],
    )
    def test_missing_field(self, username, email, password):
        with pytest.raises(ValidationError, match="All fields are required."):
            validate_signup(username, email, password)

    def test_email_without_at(self):
        with pytest.raises(ValidationError, match="Invalid email format."):
            validate_signup("ada", "ada.example.com", "secret123")

    def test_short_password(self):
        with pytest.raises(ValidationError, match="Password must be at least 6 characters."):
            validate_signup("ada", "ada@example.com", "12345")

    def test_six_character_password_is_enough(self):
        validate_signup("ada", "ada@example.com", "123456")

    def test_presence_checked_before_format(self):
        """A missing password wins over a malformed email."""
        with pytest.raises(ValidationError, match="All fields are required."):
            validate_signup("ada", "bad-email", None)


@pytest.mark.unit
class TestNewEmployeeRules:
    def test_valid_employee(self):
        validate_new_employee(**employee_fields())

    @pytest.mark.parametrize(
        "field", ["first_name", "last_name", "email", "designation", "salary", "department"]
    )
    def test_missing_required_field(self, field):
        with pytest.raises(ValidationError, match="All fields are required."):
            validate_new_employee(**employee_fields(**{field: None}))

    def test_email_without_at(self):
        with pytest.raises(ValidationError, match="Invalid email format."):
            validate_new_employee(**employee_fields(email="ada.example.com"))

    def test_salary_below_minimum(self):
        with pytest.raises(ValidationError, match="Salary must be at least 1000."):
            validate_new_employee(**employee_fields(salary=999))

    def test_salary_at_minimum(self):
        validate_new_employee(**employee_fields(salary=1000))


@pytest.mark.unit
class TestEmployeeUpdateRules:
    def test_id_required(self):
        with pytest.raises(ValidationError, match="Employee ID is required."):
            validate_employee_update(None, salary=5000)

    def test_only_id(self):
        assert validate_employee_update("some-id") == "some-id"

    def test_email_checked_when_given(self):
        with pytest.raises(ValidationError, match="Invalid email format."):
            validate_employee_update("some-id", email="nope")

    def test_salary_checked_when_given(self):
        with pytest.raises(ValidationError, match="Salary must be at least 1000."):
            validate_employee_update("some-id", salary=500)

    def test_omitted_salary_is_not_checked(self):
        validate_employee_update("some-id", email="new@example.com")

    def test_delete_requires_id(self):
        with pytest.raises(ValidationError, match="Employee ID is required."):
            validate_employee_id("")

    def test_delete_returns_id(self):
        assert validate_employee_id("some-id") == "some-id"
