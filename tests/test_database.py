"""
Tests for the storage handle
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from school.database import Database
from school.dbmodels import Departments, Students


@pytest.mark.asyncio
async def test_check_connection_before_connect():
    database = Database("sqlite:///:memory:")

    ok, error = await database.check_connection()

    assert ok is False
    assert error == "Database engine not initialized"


@pytest.mark.asyncio
async def test_check_connection_when_connected(database):
    assert await database.check_connection() == (True, None)


@pytest.mark.asyncio
async def test_connect_is_idempotent(database):
    engine = database.engine
    database.connect()

    assert database.engine is engine


@pytest.mark.asyncio
async def test_dispose_forgets_engine(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'dispose.db'}")
    database.connect()
    assert database.is_connected

    await database.dispose()

    assert not database.is_connected
    with pytest.raises(RuntimeError):
        _ = database.engine


@pytest.mark.asyncio
async def test_session_rolls_back_on_error(database):
    with pytest.raises(IntegrityError):
        async with database.session() as session:
            session.add(Students(email="orphan@example.com", dept_id=77))
            await session.flush()

    async with database.session() as session:
        result = await session.execute(select(Students))
        assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_timestamps_set_by_database(database):
    async with database.session() as session:
        dept = Departments(name="Timekeeping")
        session.add(dept)
        await session.commit()
        await session.refresh(dept)

        assert dept.created_at is not None
        assert dept.updated_at is not None


@pytest.mark.asyncio
async def test_session_connects_unconnected_handle(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'lazy.db'}")
    assert not database.is_connected

    try:
        async with database.session() as session:
            result = await session.execute(select(1))
            assert result.scalar_one() == 1
        assert database.is_connected
    finally:
        await database.dispose()
