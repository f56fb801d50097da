"""
Progress Reporting
==================

User-facing progress lines for a pin run (``reading``, ``pin``, ``dupe``,
``writing``, ``error``). The pipeline only talks to the Reporter interface;
which implementation it gets is decided once at startup:

- ConsoleReporter: colored, right-aligned event labels on stderr
- NullReporter: drops everything (``--quiet``)
- RecordingReporter: keeps events in memory (tests, embedding)
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from rich.console import Console
from rich.text import Text

from .constants import (
    EVENT_DUPE,
    EVENT_ERROR,
    EVENT_PIN,
    EVENT_READING,
    EVENT_STYLES,
    EVENT_WRITING,
)


class Reporter(Protocol):
    """Sink for pipeline progress events."""

    def emit(self, event: str, message: str) -> None:
        ...

    def reading(self, message: str) -> None:
        ...

    def pin(self, message: str) -> None:
        ...

    def dupe(self, message: str) -> None:
        ...

    def writing(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class BaseReporter:
    """Convenience methods shared by the concrete reporters."""

    def emit(self, event: str, message: str) -> None:
        raise NotImplementedError

    def reading(self, message: str) -> None:
        self.emit(EVENT_READING, message)

    def pin(self, message: str) -> None:
        self.emit(EVENT_PIN, message)

    def dupe(self, message: str) -> None:
        self.emit(EVENT_DUPE, message)

    def writing(self, message: str) -> None:
        self.emit(EVENT_WRITING, message)

    def error(self, message: str) -> None:
        self.emit(EVENT_ERROR, message)


class ConsoleReporter(BaseReporter):
    """Writes ``<event> : <message>`` lines to a rich console."""

    label_width = 10

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True, highlight=False, soft_wrap=True)

    def emit(self, event: str, message: str) -> None:
        line = Text()
        line.append(event.rjust(self.label_width), style=EVENT_STYLES.get(event, "cyan"))
        line.append(" : ", style="dim")
        line.append(message)
        self.console.print(line)


class NullReporter(BaseReporter):
    """Reporter selected by ``--quiet``."""

    def emit(self, event: str, message: str) -> None:
        pass


@dataclass
class RecordingReporter(BaseReporter):
    """Collects events as ``(event, message)`` tuples."""

    events: List[Tuple[str, str]] = field(default_factory=list)

    def emit(self, event: str, message: str) -> None:
        self.events.append((event, message))

    def messages(self, event: str) -> List[str]:
        return [message for kind, message in self.events if kind == event]


def make_reporter(quiet: bool, console: Optional[Console] = None) -> BaseReporter:
    """Pick the reporter implementation for a run."""
    if quiet:
        return NullReporter()
    return ConsoleReporter(console)


__all__ = [
    "Reporter",
    "BaseReporter",
    "ConsoleReporter",
    "NullReporter",
    "RecordingReporter",
    "make_reporter",
]
