"""Pin command - Write pinned dependencies from components/duo.json to component.json."""

import logging
from pathlib import Path
from typing import Optional

import typer

from ..config import PinConfig
from ..constants import DUOPIN_VERSION, EXIT_FAILURE, EXIT_INTERRUPTED
from ..errors import DuoPinError
from ..logger import configure_logging
from ..pipeline import run_pin
from ..reporter import ConsoleReporter, make_reporter
from .utils import console, handle_error, info, success, warning


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"duo-pin {DUOPIN_VERSION}")
        raise typer.Exit()


def pin(
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress informational output"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging and full tracebacks"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the duo-pin version and exit",
    ),
):
    """
    Pin installed component versions into component.json.

    Reads components/duo.json (written by `duo`), keeps the first version seen
    for each remote component, and replaces the `dependencies` section of
    component.json with the sorted result. Every other field in component.json
    is left as is.

    Examples:
        duo-pin
        duo-pin --quiet
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING, console)
    config = PinConfig(root=Path.cwd(), quiet=quiet, verbose=verbose)
    reporter = make_reporter(config.quiet, console)

    try:
        summary = run_pin(config, reporter)
    except DuoPinError as e:
        # Fatal diagnostics are shown even in quiet mode
        ConsoleReporter(console).error(e.message)
        raise typer.Exit(EXIT_FAILURE)
    except KeyboardInterrupt:
        info("\nPin cancelled by user")
        raise typer.Exit(EXIT_INTERRUPTED)
    except Exception as e:
        handle_error(e, verbose)
        raise typer.Exit(EXIT_FAILURE)

    if config.quiet:
        return

    conflicting = [d for d in summary.duplicates if d.conflicting]
    if conflicting:
        warning(
            f"{len(conflicting)} duplicate(s) resolved at a different version; "
            "the first version seen was kept"
        )
    action = "Created" if summary.created else "Updated"
    success(f"{action} {config.lockfile_name} with {summary.pinned} pinned dependencies")
