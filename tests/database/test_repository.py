"""
Integration tests for repository helpers against a SQLite database.
"""

import uuid

import pytest

from workforce import repository
from workforce.errors import InvalidIdError


async def add(session, **overrides):
    fields = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "gender": "Female",
        "designation": "Analyst",
        "salary": 5000.0,
        "date_of_joining": "2024-01-15",
        "department": "Research",
        "employee_photo": "https://example.com/ada.png",
    }
    fields.update(overrides)
    return await repository.create_employee(session, **fields)


@pytest.mark.integration
class TestEmployeeRepository:
    @pytest.mark.asyncio
    async def test_create_assigns_id(self, db_session):
        employee = await add(db_session)

        assert isinstance(employee.id, uuid.UUID)
        assert employee.created_at is not None

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_fields(self, db_session):
        with pytest.raises(TypeError):
            await add(db_session, nickname="ada")

    @pytest.mark.asyncio
    async def test_list_in_insertion_order(self, db_session):
        first = await add(db_session, first_name="First")
        second = await add(db_session, first_name="Second")

        employees = await repository.list_employees(db_session)

        assert [e.id for e in employees] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_get_by_id(self, db_session):
        employee = await add(db_session)

        found = await repository.get_employee(db_session, str(employee.id))

        assert found is not None
        assert found.first_name == "Ada"

    @pytest.mark.asyncio
    async def test_get_unknown_id_returns_none(self, db_session):
        assert await repository.get_employee(db_session, str(uuid.uuid4())) is None

    @pytest.mark.asyncio
    async def test_get_malformed_id_raises(self, db_session):
        with pytest.raises(InvalidIdError):
            await repository.get_employee(db_session, "not-a-uuid")

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_on_both_fields(self, db_session):
        by_department = await add(db_session, department="Engineering", designation="Manager")
        by_designation = await add(db_session, department="Platform", designation="engineer")
        await add(db_session, department="Sales", designation="Account Executive")

        matches = await repository.search_employees(db_session, "eng")

        assert {e.id for e in matches} == {by_department.id, by_designation.id}

    @pytest.mark.asyncio
    async def test_search_without_match(self, db_session):
        await add(db_session, department="Engineering", designation="engineer")

        assert await repository.search_employees(db_session, "finance") == []

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, db_session):
        await add(db_session, department="Engineering", designation="engineer")
        percent = await add(db_session, department="100% Remote", designation="Support")

        matches = await repository.search_employees(db_session, "%")

        assert [e.id for e in matches] == [percent.id]

    @pytest.mark.asyncio
    async def test_filter_exact_fields(self, db_session):
        match = await add(db_session, department="Engineering", designation="Engineer")
        await add(db_session, department="Engineering", designation="Manager")
        await add(db_session, department="engineering", designation="Engineer")

        both = await repository.filter_employees(
            db_session, department="Engineering", designation="Engineer"
        )
        department_only = await repository.filter_employees(db_session, department="Engineering")
        unconstrained = await repository.filter_employees(db_session)

        assert [e.id for e in both] == [match.id]
        assert len(department_only) == 2
        assert len(unconstrained) == 3

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, db_session):
        employee = await add(db_session)

        updated = await repository.update_employee(db_session, employee.id, {"salary": 7000.0})

        assert updated is not None
        assert updated.salary == 7000.0
        assert updated.first_name == "Ada"
        assert updated.department == "Research"

    @pytest.mark.asyncio
    async def test_update_unknown_id_returns_none(self, db_session):
        assert await repository.update_employee(db_session, uuid.uuid4(), {"salary": 7000.0}) is None

    @pytest.mark.asyncio
    async def test_delete(self, db_session):
        employee = await add(db_session)

        assert await repository.delete_employee(db_session, employee.id) is True
        assert await repository.delete_employee(db_session, employee.id) is False
        assert await repository.get_employee(db_session, employee.id) is None


@pytest.mark.integration
class TestUserRepository:
    @pytest.mark.asyncio
    async def test_create_and_find_by_username(self, db_session):
        user = await repository.create_user(
            db_session, username="ada", email="ada@example.com", password_hash="$2b$digest"
        )

        found = await repository.get_user_by_username(db_session, "ada")

        assert found is not None
        assert found.id == user.id
        assert await repository.get_user_by_username(db_session, "grace") is None
