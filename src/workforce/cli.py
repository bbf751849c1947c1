#!/usr/bin/env python3
"""
Main CLI entry point for Workforce API server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from workforce import __version__
from workforce.config import settings
from workforce.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="workforce")
def cli() -> None:
    """Workforce CLI - run the API server and prepare the database."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the Workforce API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting Workforce API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Reload/worker processes re-import the app and read settings from the environment
    if log_level == "debug":
        os.environ["WORKFORCE_DEBUG"] = "true"
        os.environ["WORKFORCE_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("WORKFORCE_DEBUG", "false")
        os.environ.setdefault("WORKFORCE_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "workforce.api.app:app",
            host=host,
            port=port,
            reload=reload,
            workers=(workers if not reload else 1),
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option("--database-url", default=None, help="Override WORKFORCE_DATABASE_URL")
def init_db(database_url: str | None) -> None:
    """Create the employees and users tables if they do not exist."""
    from workforce.database import create_tables, dispose_database, init_database

    configure_logging()

    async def do_init() -> None:
        init_database(database_url, force_reinit=database_url is not None)
        try:
            await create_tables()
        finally:
            await dispose_database()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        click.echo(f"✗ Error initializing database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database tables ready")


if __name__ == "__main__":
    cli()
