"""Log sinks that receive fully formatted console lines."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from rich.console import Console

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


class Severity(str, Enum):
    """Severity attached to every emitted line."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    TRACE = "trace"


class LogSink(Protocol):
    """Destination for console output."""

    def emit(self, severity: Severity, message: str) -> None:
        """Write one line."""
        ...


SEVERITY_STYLES: dict[Severity, str | None] = {
    Severity.DEBUG: "dim",
    Severity.INFO: None,
    Severity.WARNING: "yellow",
    Severity.ERROR: "bold red",
    Severity.TRACE: "cyan",
}


class RichSink:
    """Writes lines to a rich console, styled by severity."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def emit(self, severity: Severity, message: str) -> None:
        # Script output is plain text: no markup, no highlighting, no wrapping.
        self.console.print(
            message,
            style=SEVERITY_STYLES.get(severity),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


LOGGING_LEVELS: dict[Severity, int] = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.TRACE: TRACE_LEVEL,
}


class LoggingSink:
    """Forwards lines to a standard library logger."""

    def __init__(self, logger: logging.Logger | str = "scriptconsole") -> None:
        if isinstance(logger, str):
            logger = logging.getLogger(logger)
        self.logger = logger

    def emit(self, severity: Severity, message: str) -> None:
        self.logger.log(LOGGING_LEVELS[Severity(severity)], message)


class MemorySink:
    """Keeps every emitted line in memory."""

    def __init__(self) -> None:
        self.records: list[tuple[Severity, str]] = []

    def emit(self, severity: Severity, message: str) -> None:
        self.records.append((Severity(severity), message))

    @property
    def messages(self) -> list[str]:
        """Emitted text without severities."""
        return [message for _, message in self.records]

    def clear(self) -> None:
        self.records.clear()


__all__ = [
    "LOGGING_LEVELS",
    "LogSink",
    "LoggingSink",
    "MemorySink",
    "RichSink",
    "SEVERITY_STYLES",
    "Severity",
    "TRACE_LEVEL",
]
