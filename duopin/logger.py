"""
duo-pin Logger

Thin wrapper around the standard library logger that accepts structured
keyword context:

    logger = get_logger(__name__)
    logger.debug("Skipping local component", component="local-widget/thing")

renders as ``Skipping local component component=local-widget/thing``.

Diagnostic logs are separate from the user-facing progress lines emitted by
the reporter; they are silent unless ``configure_logging`` lowers the level.
"""

import logging
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "duopin"


class DuoPinLogger:
    """Logger adapter that formats keyword context as key=value pairs."""

    def __init__(self, name: str):
        self.name = name
        self._logger = logging.getLogger(name)

    @staticmethod
    def _format(message: str, context: Dict[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} {pairs}"

    def debug(self, message: str, **context: Any) -> None:
        self._logger.debug(self._format(message, context))

    def info(self, message: str, **context: Any) -> None:
        self._logger.info(self._format(message, context))

    def warning(self, message: str, **context: Any) -> None:
        self._logger.warning(self._format(message, context))

    def error(self, message: str, exc_info: bool = False, **context: Any) -> None:
        self._logger.error(self._format(message, context), exc_info=exc_info)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)


def get_logger(name: str) -> DuoPinLogger:
    """
    Get a logger for a module.

    Names outside the ``duopin`` hierarchy are nested under it so that
    ``configure_logging`` controls every logger the package creates.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return DuoPinLogger(name)


def configure_logging(level: int = logging.WARNING, console: Optional[Console] = None) -> None:
    """
    Configure the package root logger.

    Args:
        level: Logging level for the ``duopin`` hierarchy
        console: Rich console to render to (defaults to stderr)
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    root.addHandler(handler)


__all__ = ["DuoPinLogger", "get_logger", "configure_logging", "ROOT_LOGGER_NAME"]
