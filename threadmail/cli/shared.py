"""Shared CLI helpers: console, logger, date formatting, error exits."""

from datetime import datetime
from typing import Callable, Optional, TypeVar

import typer
from rich.console import Console

from threadmail.utils.logger import get_logger

console = Console()
logger = get_logger("threadmail.cli")

T = TypeVar("T")


def format_date(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


def call_repo(fn: Callable[..., T], *args) -> T:
    """Call a repository function; bad input prints the message and exits 2."""
    try:
        return fn(*args)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        logger.error("cli.invalid_input", error=str(e))
        raise typer.Exit(2) from e


def require_found(value: Optional[T], message: str) -> T:
    """Exit 1 with a red message when a lookup came back empty-handed."""
    if value is None:
        console.print(f"[red]{message}[/red]")
        raise typer.Exit(1)
    return value
