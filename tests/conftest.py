"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from strawberry.types import ExecutionResult

from school.database import Database
from school.graphql.context import build_context
from school.graphql.schema import schema

Execute = Callable[..., Awaitable[ExecutionResult]]


@pytest_asyncio.fixture(scope="function")
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """A connected storage handle on a fresh SQLite file with all tables created."""
    db = Database(f"sqlite:///{tmp_path / 'school.db'}", echo=False)
    db.connect()
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture(scope="function")
def execute(database: Database) -> Execute:
    """Run a GraphQL operation against the schema with a fresh request context."""

    async def _execute(query: str, variables: dict[str, Any] | None = None) -> ExecutionResult:
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=build_context(database),
        )

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
