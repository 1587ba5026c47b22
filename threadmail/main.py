"""Entry point: delegates to the Typer CLI app."""

from rich.traceback import install

from threadmail.cli import app


def main() -> None:
    install(show_locals=False, max_frames=5, word_wrap=True)
    app()


if __name__ == "__main__":
    main()
