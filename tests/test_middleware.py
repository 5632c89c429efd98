"""
Tests for request logging helpers
"""

import pytest

from school.middleware import operation_name_from_payload, sanitize_query_params


def test_sanitize_query_params_redacts_sensitive_keys():
    params = {"api_key": "abc", "Authorization": "Bearer x", "page": "2"}

    assert sanitize_query_params(params) == {
        "api_key": "[REDACTED]",
        "Authorization": "[REDACTED]",
        "page": "2",
    }


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"operationName": "GetStudents", "query": "query GetStudents { students { id } }"},
         "GetStudents"),
        ({"query": "query Roster { students { id } }"}, "Roster"),
        ({"query": "mutation Enroll { enroll(id: 1) { id } }"}, "mutation:Enroll"),
        ({"query": "{ students { id } }"}, "unnamed_operation"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"},
         "__introspection"),
        ({}, None),
    ],
)
def test_operation_name_from_payload(payload, expected):
    assert operation_name_from_payload(payload) == expected
