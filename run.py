#!/usr/bin/env python3
"""
Application Entry Script.

Main entry point for the campground booking API. All functionality is
accessible through command-line options.

Usage:
    python run.py --help
    python run.py --action server --verbose
    python run.py --action init-db
    python run.py --action create-admin --name Admin --email admin@example.com
    python run.py --action config
"""

import asyncio
import subprocess
import sys
from pathlib import Path

import click

# Ensure project root is in path for absolute imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from campground_api.core.config import validate_project_root
from campground_api.core.logging import get_logger, setup_logging


@click.command()
@click.option(
    "--action",
    type=click.Choice(["server", "init-db", "create-admin", "config", "info"]),
    default="info",
    help="Action to perform.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option("--host", default=None, help="Server host (for server action).")
@click.option("--port", default=None, type=int, help="Server port (for server action).")
@click.option("--reload", is_flag=True, help="Enable auto-reload (for server action).")
@click.option("--name", default=None, help="Admin display name (for create-admin).")
@click.option("--email", default=None, help="Admin email (for create-admin).")
@click.option(
    "--password",
    default=None,
    help="Admin password (for create-admin). Prompted when omitted.",
)
def main(
    action: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
    reload: bool,
    name: str | None,
    email: str | None,
    password: str | None,
) -> None:
    """
    Campground API Entry Point.

    Run the server, prepare the database, bootstrap an admin account
    or view configuration.

    Examples:

        # Start development server
        python run.py --action server --reload --verbose

        # Create tables in the configured database
        python run.py --action init-db

        # Create the first admin account
        python run.py --action create-admin --name Admin --email admin@example.com
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type="console", enable_file_logging=False)
    logger = get_logger(__name__)

    logger.debug("Starting application", extra={"action": action, "log_level": log_level})

    if action == "server":
        run_server(logger, host, port, reload)
    elif action == "init-db":
        init_db(logger)
    elif action == "create-admin":
        create_admin(logger, name, email, password)
    elif action == "config":
        show_config(logger)
    elif action == "info":
        show_info(logger)


def run_server(logger, host: str | None, port: int | None, reload: bool) -> None:
    """Start the FastAPI server under uvicorn."""
    from campground_api.core.config import get_app_config

    server = get_app_config().application.server
    server_host = host or server.host
    server_port = port or server.port

    logger.info(
        "Starting server",
        extra={"host": server_host, "port": server_port, "reload": reload},
    )

    cmd = [
        sys.executable, "-m", "uvicorn",
        "campground_api.main:app",
        "--host", server_host,
        "--port", str(server_port),
    ]

    if reload:
        cmd.append("--reload")

    click.echo(f"Starting server at http://{server_host}:{server_port}")
    click.echo("Press Ctrl+C to stop\n")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except subprocess.CalledProcessError as e:
        logger.error("Server failed to start", extra={"exit_code": e.returncode})
        sys.exit(e.returncode)


def init_db(logger) -> None:
    """Create every table in the configured database."""
    from campground_api.core.database import create_all_tables, dispose_engine

    async def _run() -> None:
        try:
            await create_all_tables()
        finally:
            await dispose_engine()

    try:
        asyncio.run(_run())
    except Exception as e:
        logger.error("Database initialisation failed", extra={"error": str(e)})
        click.echo(click.style(f"Error creating tables: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style("Database tables created.", fg="green"))


def create_admin(logger, name: str | None, email: str | None, password: str | None) -> None:
    """Create an admin account without going through the public API."""
    from campground_api.core.database import dispose_engine, get_session_factory
    from campground_api.core.exceptions import ApplicationError
    from campground_api.services.auth import AuthService

    name = name or click.prompt("Name")
    email = email or click.prompt("Email")
    password = password or click.prompt("Password", hide_input=True, confirmation_prompt=True)

    if len(password) < 6:
        click.echo(click.style("Password must be at least 6 characters.", fg="red"), err=True)
        sys.exit(1)

    async def _run():
        try:
            async with get_session_factory()() as session:
                user = await AuthService(session).create_admin(name, email, password)
                await session.commit()
                return user
        finally:
            await dispose_engine()

    try:
        user = asyncio.run(_run())
    except ApplicationError as e:
        logger.error("Admin creation failed", extra={"error": e.message})
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style(f"Admin {user.email} created (id {user.id}).", fg="green"))


def _echo_section(title: str, values: dict) -> None:
    click.echo(f"\n{title}:")
    click.echo("-" * 40)
    for key, value in values.items():
        if isinstance(value, dict):
            click.echo(f"  {key}:")
            for k, v in value.items():
                click.echo(f"    {k}: {v}")
        else:
            click.echo(f"  {key}: {value}")


def show_config(logger) -> None:
    """Display loaded configuration."""
    from campground_api.core.config import get_app_config

    click.echo("Application Configuration:")

    try:
        app_config = get_app_config()
    except (ValueError, FileNotFoundError) as e:
        logger.error("Failed to load configuration", extra={"error": str(e)})
        click.echo(click.style(f"Error loading configuration: {e}", fg="red"))
        sys.exit(1)

    _echo_section("Application Settings (from YAML)", app_config.application.model_dump())
    _echo_section("Database Settings (from YAML)", app_config.database.model_dump())
    _echo_section("Logging Settings (from YAML)", app_config.logging.model_dump())
    _echo_section("Feature Flags (from YAML)", app_config.features.model_dump())
    _echo_section("Security Settings (from YAML)", app_config.security.model_dump())

    logger.info("Configuration displayed successfully")


def show_info(logger) -> None:
    """Display application information."""
    from campground_api.core.config import get_app_config

    application = get_app_config().application
    click.echo(application.name)
    click.echo("=" * 40)
    click.echo(f"Version: {application.version}")
    click.echo(f"Description: {application.description}")
    click.echo()
    click.echo("Available Actions:")
    click.echo("  --action server        Start the API server")
    click.echo("  --action init-db       Create database tables")
    click.echo("  --action create-admin  Create an admin account")
    click.echo("  --action config        Display configuration")
    click.echo("  --action info          Show this information")
    click.echo()
    click.echo("Logging Options:")
    click.echo("  --verbose, -v     Enable INFO level logging")
    click.echo("  --debug, -d       Enable DEBUG level logging")

    logger.debug("Info displayed")


if __name__ == "__main__":
    main()
