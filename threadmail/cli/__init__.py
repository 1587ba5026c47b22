"""CLI commands: browsing, directory, server/database."""

from typer import Typer

from threadmail.cli import browse, directory, server_mode

app = Typer(help="Threaded mailbox: browse folders, threads and people")


def register_commands() -> None:
    """Register all CLI commands on the global app."""
    app.command()(browse.folders)
    app.command()(browse.threads)
    app.command()(browse.thread)
    app.command()(browse.search)
    app.command()(directory.users)
    app.command()(directory.profile)
    app.command(name="init-db")(server_mode.init_db_command)
    app.command()(server_mode.serve)


register_commands()
