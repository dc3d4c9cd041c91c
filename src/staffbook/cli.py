#!/usr/bin/env python3
"""
Main CLI entry point for Staffbook backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from staffbook import __version__
from staffbook.config import settings
from staffbook.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="staffbook")
def cli() -> None:
    """Staffbook CLI - run the API server and manage its database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to (PORT environment variable)",
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
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Staffbook API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info("Starting Staffbook API server", host=host, port=port, reload=reload)

    # The app module reads settings at import time, including in reload subprocesses
    os.environ["STAFFBOOK_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["STAFFBOOK_DEBUG"] = "true"

    try:
        uvicorn.run(
            "staffbook.api.app:app",
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
def init_db() -> None:
    """Create missing tables directly from the ORM models."""
    from staffbook.database.connection import Database

    configure_logging()

    async def do_init():
        database = Database.from_settings(settings)
        try:
            ok, error = await database.ping()
            if not ok:
                click.echo(f"✗ {error}", err=True)
                sys.exit(1)
            await database.create_all()
            click.echo("✓ Database tables created")
        finally:
            await database.dispose()

    asyncio.run(do_init())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
