"""duo-pin CLI - Main entry point."""

import typer

from . import pin_cmd

app = typer.Typer(
    name="duo-pin",
    help="Pin resolved component versions into component.json",
    add_completion=False,
)

app.command()(pin_cmd.pin)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
