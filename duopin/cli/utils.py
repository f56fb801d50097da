"""Console helpers shared by duo-pin commands."""

import traceback

from rich.console import Console
from rich.markup import escape

from ..errors import DuoPinError

console = Console(stderr=True, highlight=False, soft_wrap=True)


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {message}")


def warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    console.print(f"[red]✗[/red] {message}")


def handle_error(e: Exception, verbose: bool = False) -> None:
    """Print a single diagnostic for an unexpected failure."""
    if isinstance(e, DuoPinError):
        error(e.message)
        return

    error(f"Unexpected error: {escape(str(e))}")
    if verbose:
        console.print(traceback.format_exc(), markup=False)
    else:
        console.print("[dim]Run with --verbose for the full traceback[/dim]")
