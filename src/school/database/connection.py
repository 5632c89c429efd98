"""
Database connection management

The storage handle is an explicit object: the application builds one
`Database`, connects it during startup, hands it to the GraphQL context and
disposes it on shutdown. Nothing here keeps a module-level engine.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import get_async_database_url, settings
from ..logging import get_logger

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores FOREIGN KEY clauses unless asked per connection."""
    _ = connection_record
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Async engine plus session factory for one database."""

    def __init__(self, database_url: str | None = None, echo: bool | None = None):
        self.database_url = database_url or settings.database_url
        self.echo = settings.sql_echo if echo is None else echo
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not initialized")
        return self._engine

    def connect(self) -> None:
        """Create the engine and session factory. Calling it twice is a no-op."""
        if self._engine is not None:
            return

        async_url = get_async_database_url(self.database_url)
        self._engine = create_async_engine(async_url, echo=self.echo)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Database initialized", dialect=self._engine.dialect.name)

    async def dispose(self) -> None:
        """Close every pooled connection and forget the engine."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connections closed")

    async def create_all(self) -> None:
        """Create all tables from the ORM metadata (development and tests)."""
        from ..dbmodels import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a session; committed on success, rolled back on error."""
        if self._session_factory is None:
            self.connect()
        if self._session_factory is None:
            raise RuntimeError("Database not initialized")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def check_connection(self) -> tuple[bool, str | None]:
        """
        Test the database connection and return a helpful error message.

        Returns:
            tuple: (success: bool, error_message: str | None)
        """
        if self._engine is None:
            return False, "Database engine not initialized"

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                return True, None
        except Exception as e:
            error_str = str(e)
            error_type = type(e).__name__

            if "does not exist" in error_str:
                db_name = self.database_url.split("/")[-1].split("?")[0]
                return False, (
                    f"Cannot connect to database: {error_str}\n"
                    f"The database '{db_name}' or its role may not exist. "
                    f"Create it and run migrations (school-migrate upgrade)."
                )
            elif "Connection refused" in error_str or "could not connect" in error_str:
                return False, (
                    f"Cannot connect to database server: {error_str}\n"
                    f"The database server appears to be down or unreachable."
                )
            elif "password authentication failed" in error_str:
                return False, (
                    f"Database authentication failed: {error_str}\n"
                    f"Please check your database credentials."
                )
            else:
                return False, f"Database connection error ({error_type}): {error_str}"
