"""Server and database commands: init-db, serve."""

import typer
import uvicorn

from threadmail.config import API_HOST, API_PORT, DATABASE_URL
from threadmail.db import init_db

from .shared import console, logger


def init_db_command(
    seed: bool = typer.Option(True, "--seed/--no-seed", help="Load demo CSVs into a new database"),
) -> None:
    """Create tables (and seed demo data when the database is new)."""
    init_db(seed=seed)
    console.print(f"[green]Database ready:[/green] {DATABASE_URL}")


def serve(
    host: str = typer.Option(API_HOST, "--host", help="Bind address"),
    port: int = typer.Option(API_PORT, "--port", "-p", help="Port"),
) -> None:
    """Run the mailbox HTTP API with uvicorn."""
    from threadmail.api import create_app

    logger.bind(command="serve").info("serve.start", host=host, port=port)
    uvicorn.run(create_app(), host=host, port=port)
