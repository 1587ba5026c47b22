"""Browse commands: folders, folder threads, one thread, search."""

from typing import Optional

import typer
from rich.table import Table

from threadmail.db.repositories import (
    get_emails_for_thread,
    get_folders_with_thread_count,
    get_thread_in_folder,
    get_threads_for_folder,
    search_threads,
)
from threadmail.utils.text import format_email_string

from .shared import call_repo, console, format_date, logger, require_found


def folders() -> None:
    """List folders with thread counts (Inbox, Flagged, Sent first)."""
    summary = call_repo(get_folders_with_thread_count)
    table = Table(title="Folders")
    table.add_column("Folder", style="cyan")
    table.add_column("Threads", justify="right")
    for folder in summary.special_folders:
        table.add_row(f"[bold]{folder.name}[/bold]", str(folder.thread_count))
    if summary.special_folders and summary.other_folders:
        table.add_section()
    for folder in summary.other_folders:
        table.add_row(folder.name, str(folder.thread_count))
    console.print(table)


def threads(
    folder: str = typer.Argument(..., help="Folder name, any case (e.g. inbox)"),
    thread_id: Optional[str] = typer.Option(None, "--thread", "-t", help="Show only this thread if it is in the folder"),
) -> None:
    """List threads in a folder, most recent first."""
    log = logger.bind(command="threads", folder=folder)
    if thread_id:
        header = require_found(
            call_repo(get_thread_in_folder, folder, thread_id),
            f"Thread {thread_id!r} is not in folder {folder!r}.",
        )
        sender = format_email_string(header.sender_first_name, header.sender_last_name, header.sender_email)
        console.print(f"[bold]{header.subject or '(no subject)'}[/bold]  [dim]{format_date(header.last_activity_date)}[/dim]")
        console.print(f"From {sender or '(unknown sender)'}")
        return

    rows = call_repo(get_threads_for_folder, folder)
    log.info("threads.listed", count=len(rows))
    if not rows:
        console.print(f"[yellow]No threads in {folder!r}.[/yellow]")
        return
    table = Table(title=f"{folder} ({len(rows)})")
    table.add_column("Thread", style="dim")
    table.add_column("From")
    table.add_column("Subject", style="cyan")
    table.add_column("Last activity", justify="right")
    for thread in rows:
        latest = thread.latest_email
        sender = latest.sender if latest else None
        table.add_row(
            thread.id,
            format_email_string(sender.first_name, sender.last_name, sender.email) if sender else "-",
            thread.subject or "(no subject)",
            format_date(thread.last_activity_date),
        )
    console.print(table)


def thread(thread_id: str = typer.Argument(..., help="Thread id")) -> None:
    """Print a whole conversation, oldest email first."""
    conversation = require_found(call_repo(get_emails_for_thread, thread_id), f"Thread {thread_id!r} not found.")
    console.print(f"[bold]{conversation.subject or '(no subject)'}[/bold]")
    for email in conversation.emails:
        sender = email.sender
        name = format_email_string(sender.first_name, sender.last_name, None) if sender else "(unknown sender)"
        console.rule(f"{name}  {format_date(email.sent_date)}", align="left")
        console.print(email.body or "")


def search(query: str = typer.Argument(..., help="Text to look for in subjects, bodies and senders")) -> None:
    """Search threads by subject, body or sender."""
    results = call_repo(search_threads, query)
    logger.bind(command="search").info("search.done", query=query, hits=len(results))
    if not results:
        console.print("[yellow]No matches.[/yellow]")
        return
    table = Table(title=f"Search: {query}")
    table.add_column("Folder", style="magenta")
    table.add_column("From")
    table.add_column("Subject", style="cyan")
    table.add_column("Last activity", justify="right")
    for hit in results:
        table.add_row(
            hit.folder_name or "-",
            hit.latest_email.display_sender if hit.latest_email else "-",
            hit.subject or "(no subject)",
            format_date(hit.last_activity_date),
        )
    console.print(table)
