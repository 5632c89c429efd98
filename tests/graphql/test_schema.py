"""
Tests for the GraphQL schema surface
"""

import pytest

from school.graphql.schema import get_schema_sdl, validate_schema


@pytest.fixture(scope="module")
def sdl() -> str:
    return get_schema_sdl()


def test_schema_validates():
    validate_schema()


@pytest.mark.parametrize(
    "field",
    [
        "enrollment: [Student!]!",
        "students: [Student!]!",
        "student(id: Int!): Student",
        "departments: [Department!]!",
        "department(id: Int!): Department",
        "courses: [Course!]!",
        "course(id: Int!): Course",
        "teachers: [Teacher!]!",
        "teacher(id: Int!): Teacher",
    ],
)
def test_query_fields(sdl, field):
    assert field in sdl


@pytest.mark.parametrize(
    "mutation",
    ["registerStudent(", "enroll(id: Int!): Student!", "createTeacher(data: TeacherCreateInput!)",
     "createCourse(", "createDepartment("],
)
def test_mutation_fields(sdl, mutation):
    assert mutation in sdl


def test_relation_nullability_is_preserved(sdl):
    assert "dept: Department!" in sdl
    assert "teacher: Teacher\n" in sdl
    assert "dept: Department\n" in sdl


def test_foreign_keys_are_not_exposed(sdl):
    assert "deptId: Int!\n" not in sdl
    assert "teacherId" not in sdl


def test_camel_case_fields(sdl):
    for field in ("fullName", "createdAt", "updatedAt", "teacherEmail"):
        assert field in sdl
    assert "enum TeacherType" in sdl
