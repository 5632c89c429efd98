"""
Integration tests for when relation fields hit the database
"""

import pytest
from sqlalchemy import event


@pytest.fixture
def statements(database):
    """Record every SQL statement sent through the engine."""
    recorded: list[str] = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        recorded.append(statement)

    sync_engine = database.engine.sync_engine
    event.listen(sync_engine, "before_cursor_execute", before_cursor_execute)
    yield recorded
    event.remove(sync_engine, "before_cursor_execute", before_cursor_execute)


async def seed(execute) -> None:
    dept = await execute('mutation { createDepartment(name: "Optics") { id } }')
    dept_id = dept.data["createDepartment"]["id"]
    for email in ("a@example.com", "b@example.com", "c@example.com"):
        result = await execute(
            "mutation($email: String!, $deptId: Int!) "
            "{ registerStudent(email: $email, deptId: $deptId) { id } }",
            {"email": email, "deptId": dept_id},
        )
        assert result.errors is None

    teacher = await execute(
        'mutation { createTeacher(data: {email: "t@example.com", '
        'courses: [{code: "OPT1", title: "Lenses"}, {code: "OPT2", title: "Mirrors"}]}) { id } }'
    )
    assert teacher.errors is None


@pytest.mark.integration
@pytest.mark.asyncio
async def test_unselected_relation_issues_no_lookup(execute, statements):
    await seed(execute)
    statements.clear()

    result = await execute("{ students { id email } }")

    assert result.errors is None
    assert len(result.data["students"]) == 3
    assert len(statements) == 1


@pytest.mark.integration
@pytest.mark.asyncio
async def test_selected_many_to_one_relation_adds_one_batched_lookup(execute, statements):
    await seed(execute)
    statements.clear()

    result = await execute("{ students { id dept { name } } }")

    assert result.errors is None
    assert [s["dept"]["name"] for s in result.data["students"]] == ["Optics"] * 3
    assert len(statements) == 2
    assert "departments" in statements[1]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_course_teacher_lookup_only_when_selected(execute, statements):
    await seed(execute)

    statements.clear()
    plain = await execute("{ courses { code } }")
    plain_count = len(statements)

    statements.clear()
    with_teacher = await execute("{ courses { code teacher { email } } }")

    assert plain.errors is None
    assert with_teacher.errors is None
    assert plain_count == 1
    assert len(statements) == 2
    assert all(c["teacher"] == {"email": "t@example.com"} for c in with_teacher.data["courses"])


@pytest.mark.integration
@pytest.mark.asyncio
async def test_one_to_many_relation_only_when_selected(execute, statements):
    await seed(execute)

    statements.clear()
    await execute("{ departments { name } }")
    assert len(statements) == 1

    statements.clear()
    result = await execute("{ departments { name students { email } } }")
    assert result.errors is None
    assert len(result.data["departments"][0]["students"]) == 3
    assert len(statements) == 2
