"""
Integration tests for department operations against a real database
"""

import pytest

CREATE_DEPARTMENT = """
mutation CreateDepartment($name: String!, $description: String) {
  createDepartment(name: $name, description: $description) {
    id
    name
    description
    createdAt
    updatedAt
  }
}
"""

DEPARTMENT_BY_ID = """
query Department($id: Int!) {
  department(id: $id) {
    id
    name
    description
  }
}
"""


@pytest.mark.integration
@pytest.mark.asyncio
async def test_create_department_then_query_by_id(execute):
    created = await execute(
        CREATE_DEPARTMENT, {"name": "Mathematics", "description": "Numbers and proofs"}
    )
    assert created.errors is None
    dept = created.data["createDepartment"]
    assert dept["createdAt"] is not None
    assert dept["updatedAt"] is not None

    fetched = await execute(DEPARTMENT_BY_ID, {"id": dept["id"]})

    assert fetched.errors is None
    assert fetched.data["department"] == {
        "id": dept["id"],
        "name": "Mathematics",
        "description": "Numbers and proofs",
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_description_is_optional(execute):
    created = await execute(CREATE_DEPARTMENT, {"name": "History"})

    assert created.errors is None
    assert created.data["createDepartment"]["description"] is None


@pytest.mark.integration
@pytest.mark.asyncio
async def test_missing_department_is_null_not_error(execute):
    result = await execute(DEPARTMENT_BY_ID, {"id": 9999})

    assert result.errors is None
    assert result.data["department"] is None


@pytest.mark.integration
@pytest.mark.asyncio
async def test_duplicate_department_name_is_rejected(execute):
    first = await execute(CREATE_DEPARTMENT, {"name": "Physics"})
    assert first.errors is None

    second = await execute(CREATE_DEPARTMENT, {"name": "Physics"})

    assert second.errors is not None
    assert second.data is None

    listed = await execute("{ departments { name } }")
    assert listed.data["departments"] == [{"name": "Physics"}]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_departments_lists_every_row(execute):
    for name in ("Art", "Biology", "Chemistry"):
        await execute(CREATE_DEPARTMENT, {"name": name})

    result = await execute("{ departments { name } }")

    assert result.errors is None
    assert [d["name"] for d in result.data["departments"]] == ["Art", "Biology", "Chemistry"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_department_students_relation(execute):
    cs = await execute(CREATE_DEPARTMENT, {"name": "Computer Science"})
    other = await execute(CREATE_DEPARTMENT, {"name": "Law"})
    cs_id = cs.data["createDepartment"]["id"]
    other_id = other.data["createDepartment"]["id"]

    register = """
    mutation Register($email: String!, $deptId: Int!) {
      registerStudent(email: $email, deptId: $deptId) { id }
    }
    """
    await execute(register, {"email": "ada@example.com", "deptId": cs_id})
    await execute(register, {"email": "alan@example.com", "deptId": cs_id})
    await execute(register, {"email": "portia@example.com", "deptId": other_id})

    result = await execute(
        """
        query DepartmentStudents($id: Int!) {
          department(id: $id) {
            students { email }
            courses { code }
          }
        }
        """,
        {"id": cs_id},
    )

    assert result.errors is None
    assert result.data["department"]["students"] == [
        {"email": "ada@example.com"},
        {"email": "alan@example.com"},
    ]
    assert result.data["department"]["courses"] == []
