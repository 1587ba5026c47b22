"""Directory commands: address book and user profile."""

import typer
from rich.table import Table

from threadmail.db.repositories import get_all_email_addresses, get_user_profile
from threadmail.utils.text import format_email_string

from .shared import call_repo, console, require_found


def users() -> None:
    """List every user's name and address."""
    entries = call_repo(get_all_email_addresses)
    for entry in entries:
        console.print(format_email_string(entry.first_name, entry.last_name, entry.email))


def profile(user_id: str = typer.Argument(..., help="User id")) -> None:
    """Show a user's profile and their latest authored threads."""
    user = require_found(call_repo(get_user_profile, user_id), f"User {user_id!r} not found.")
    table = Table(show_header=False, title=format_email_string(user.first_name, user.last_name, user.email))
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for label, value in (
        ("Job title", user.job_title),
        ("Company", user.company),
        ("Location", user.location),
        ("LinkedIn", user.linkedin),
        ("Twitter", user.twitter),
        ("GitHub", user.github),
    ):
        if value:
            table.add_row(label, value)
    console.print(table)
    if user.latest_threads:
        console.print("[bold]Latest threads[/bold]")
        for recent in user.latest_threads:
            console.print(f"  • {recent.subject or '(no subject)'}")
