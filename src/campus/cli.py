#!/usr/bin/env python3
"""
Main CLI entry point for the campus server.
"""

import json
import os
import sys

import click
import uvicorn

from campus import __version__
from campus.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="campus")
def cli() -> None:
    """Campus CLI - run the GraphQL server and inspect its data."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=4000,
    type=int,
    help="Port to bind to (default: 4000)",
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
    """Start the Campus GraphQL server.

    The data lives in process memory, so the server always runs a single
    worker.
    """

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Campus API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app factory reads settings from the environment on import
    if log_level == "debug":
        os.environ["CAMPUS_DEBUG"] = "true"
        os.environ["CAMPUS_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("CAMPUS_DEBUG", "false")
        os.environ.setdefault("CAMPUS_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "campus.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            workers=1,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from campus.graphql.schema import schema as graphql_schema
    from campus.graphql.schema import validate_schema

    configure_logging(log_level="warning")

    try:
        validate_schema()
    except Exception as e:
        click.echo(f"✗ Schema is invalid: {e}", err=True)
        sys.exit(1)

    click.echo(graphql_schema.as_str())


@cli.command()
def seed() -> None:
    """Print the seed dataset as JSON."""
    from campus.store import EntityStore

    configure_logging(log_level="warning")

    click.echo(json.dumps(EntityStore.seeded().snapshot(), indent=2))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
