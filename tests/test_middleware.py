"""Unit tests for request logging helpers."""

import pytest

from workforce.middleware import operation_name_from_query, sanitize_query_params


@pytest.mark.unit
class TestSanitizeQueryParams:
    def test_redacts_sensitive_keys(self):
        params = {"password": "secret123", "api_key": "abc", "searchTerm": "eng"}

        sanitized = sanitize_query_params(params)

        assert sanitized == {
            "password": "[REDACTED]",
            "api_key": "[REDACTED]",
            "searchTerm": "eng",
        }

    def test_case_insensitive_match(self):
        assert sanitize_query_params({"UserPassword": "x"}) == {"UserPassword": "[REDACTED]"}


@pytest.mark.unit
class TestOperationName:
    @pytest.mark.parametrize(
        "query,expected",
        [
            ("query GetEmployee($id: ID!) { getEmployeeById(id: $id) { id } }", "GetEmployee"),
            ("mutation Signup { signup { id } }", "mutation:Signup"),
            ("{ getAllEmployees { id } }", "getAllEmployees"),
            ('mutation { deleteEmployee(id: "1") }', "mutation:deleteEmployee"),
            ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
            ("", None),
        ],
    )
    def test_operation_name_from_query(self, query, expected):
        assert operation_name_from_query(query) == expected
