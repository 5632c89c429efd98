#!/usr/bin/env python3
"""
CLI entry point for School database migrations.

Every command works on one database URL (``--database-url`` or
``SCHOOL_DATABASE_URL``). The URL is checked with the same storage handle the
server uses before alembic touches the schema, so a bad URL fails with the
handle's diagnostic instead of an alembic traceback.
"""

import asyncio
import sys
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from school import __version__
from school.config import settings
from school.database.connection import Database
from school.logging import configure_logging, get_logger

logger = get_logger(__name__)

PROJECT_DIR = Path(__file__).resolve().parents[3]


def get_alembic_config(database_url: str) -> Config:
    """Alembic config for this project with ``database_url`` handed to ``alembic/env.py``."""
    alembic_ini = PROJECT_DIR / "alembic.ini"
    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(PROJECT_DIR / "alembic"))
    config.attributes["database_url"] = database_url
    return config


async def _reachable(database_url: str) -> tuple[bool, str | None]:
    database = Database(database_url)
    database.connect()
    try:
        return await database.check_connection()
    finally:
        await database.dispose()


def _run(ctx: click.Context, action: str, fn, *args) -> None:
    database_url = ctx.obj["database_url"]

    ok, error = asyncio.run(_reachable(database_url))
    if not ok:
        logger.error("Database unreachable", action=action, error=error)
        click.echo(f"✗ {error}", err=True)
        sys.exit(1)

    try:
        fn(get_alembic_config(database_url), *args)
    except Exception as e:
        logger.error("Migration command failed", action=action, error=str(e))
        click.echo(f"✗ {action} failed: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option(
    "--database-url",
    default=None,
    help="Connection string (default: SCHOOL_DATABASE_URL)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="school-migrate")
@click.pass_context
def main(ctx: click.Context, database_url: str | None, log_level: str) -> None:
    """Apply or roll back the students/departments/teachers/courses schema."""
    configure_logging(debug=(log_level == "debug"))
    ctx.obj = {"database_url": database_url or settings.database_url}


@main.command()
@click.argument("revision", default="head")
@click.pass_context
def upgrade(ctx: click.Context, revision: str) -> None:
    """Upgrade the school schema (default: head)."""
    _run(ctx, "upgrade", command.upgrade, revision)
    logger.info("School schema upgraded", revision=revision)


@main.command()
@click.argument("revision", default="-1")
@click.pass_context
def downgrade(ctx: click.Context, revision: str) -> None:
    """Downgrade the school schema (default: one step)."""
    _run(ctx, "downgrade", command.downgrade, revision)
    logger.info("School schema downgraded", revision=revision)


@main.command()
@click.pass_context
def current(ctx: click.Context) -> None:
    """Show the revision the database is at."""
    _run(ctx, "current", command.current)


if __name__ == "__main__":
    main()
