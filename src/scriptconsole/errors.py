"""Exceptions raised by the script console."""

from __future__ import annotations


class ConsoleError(Exception):
    """Base class for console failures surfaced to the caller."""


class InvalidLabelError(ConsoleError, TypeError):
    """Raised when a timer label is not a string."""

    def __init__(self, label: object) -> None:
        self.label = label
        super().__init__("label must be a string")


class TimerNotFoundError(ConsoleError, LookupError):
    """Raised when ``timeEnd`` is called for a label that was never started."""

    def __init__(self, label: object) -> None:
        self.label = label
        super().__init__(f"No such label: {label}")


class ConsoleAssertionError(ConsoleError, AssertionError):
    """Raised by ``assert`` when its condition is falsy."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


__all__ = [
    "ConsoleAssertionError",
    "ConsoleError",
    "InvalidLabelError",
    "TimerNotFoundError",
]
