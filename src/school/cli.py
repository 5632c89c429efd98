#!/usr/bin/env python3
"""
Main CLI entry point for the School API server.
"""

import asyncio
import sys

import click
import uvicorn

from school import __version__
from school.config import settings
from school.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="school")
def cli() -> None:
    """School CLI - run the GraphQL server and manage the local database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: $PORT, else 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Start the School API server."""
    host = host or settings.api_host
    port = port or settings.api_port

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting School API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    try:
        uvicorn.run(
            "school.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option(
    "--database-url",
    default=None,
    help="Connection string (default: SCHOOL_DATABASE_URL)",
)
def init_db(database_url: str | None) -> None:
    """Create all tables directly from the models (local development)."""
    from school.database import Database

    configure_logging()

    async def do_init():
        database = Database(database_url)
        database.connect()
        try:
            await database.create_all()
        finally:
            await database.dispose()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Tables created")


@cli.command("print-schema")
def print_schema() -> None:
    """Print the GraphQL schema as SDL."""
    from school.graphql.schema import get_schema_sdl

    click.echo(get_schema_sdl())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
