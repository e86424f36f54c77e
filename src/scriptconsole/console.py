"""Console facade exposed to scripts as ``console``."""

from __future__ import annotations

import sys
import threading
import time as _time
import traceback
from collections.abc import Callable
from typing import Any, Literal, NoReturn

from .errors import ConsoleAssertionError, ConsoleError, InvalidLabelError, TimerNotFoundError
from .formatting import format_message, inspect, sprintf
from .sinks import LogSink, Severity
from .state import ConsoleState

AssertPolicy = Literal["raise", "exit"]

DEFAULT_INDENT = "  "


def monotonic_ms() -> float:
    """Current monotonic time in milliseconds."""
    return _time.monotonic() * 1000


class ScriptConsole:
    """Browser-style console verbs layered over a log sink.

    Every verb renders its arguments into text, prefixes the current group
    indentation and hands each resulting line to ``sink``. Methods use
    snake_case names; the camelCase names scripts expect are aliases.
    """

    def __init__(
        self,
        sink: LogSink,
        *,
        indent_unit: str = DEFAULT_INDENT,
        assert_policy: AssertPolicy = "raise",
        clock: Callable[[], float] | None = None,
        line_reader: Callable[[str], str] | None = None,
        state: ConsoleState | None = None,
    ) -> None:
        """Initialize the console.

        Args:
            sink: Receives every formatted line
            indent_unit: Prefix added per open group
            assert_policy: "raise" fails the caller, "exit" stops the process
            clock: Millisecond time source for timers
            line_reader: Backs getline(); optional
            state: Shared state, a fresh one if omitted
        """
        self.sink = sink
        self.indent_unit = indent_unit
        self.assert_policy = assert_policy
        self.clock = clock or monotonic_ms
        self.line_reader = line_reader
        self.state = state or ConsoleState()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def _emit(self, severity: Severity, message: str) -> None:
        with self._lock:
            prefix = self.state.prefix(self.indent_unit)
        self.sink.emit(severity, prefix + message)

    def _emit_lines(self, severity: Severity, message: str) -> None:
        for line in message.split("\n"):
            self._emit(severity, line)

    # ------------------------------------------------------------------
    # Plain verbs
    # ------------------------------------------------------------------

    def debug(self, *args: Any) -> None:
        self._emit(Severity.DEBUG, format_message(args))

    def debug_lines(self, *args: Any) -> None:
        self._emit_lines(Severity.DEBUG, format_message(args))

    def info(self, *args: Any) -> None:
        self._emit(Severity.INFO, format_message(args))

    def info_lines(self, *args: Any) -> None:
        self._emit_lines(Severity.INFO, format_message(args))

    def warn(self, *args: Any) -> None:
        self._emit(Severity.WARNING, format_message(args))

    def warn_lines(self, *args: Any) -> None:
        self._emit_lines(Severity.WARNING, format_message(args))

    def error(self, *args: Any) -> None:
        self._emit(Severity.ERROR, format_message(args))

    def error_lines(self, *args: Any) -> None:
        self._emit_lines(Severity.ERROR, format_message(args))

    log = info
    log_lines = info_lines

    def dir(self, obj: Any) -> None:
        """Pretty-print a single object without format substitution."""
        self._emit_lines(Severity.INFO, inspect(obj, pretty_print=True))

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------

    def assert_(self, condition: Any, *args: Any) -> None:
        """Log and fail when ``condition`` is falsy.

        Raises:
            ConsoleAssertionError: With the "raise" policy
            SystemExit: With the "exit" policy
        """
        if condition:
            return
        message = format_message(args)
        self._emit(Severity.ERROR, message)
        self._fail(message)

    def _fail(self, message: str) -> NoReturn:
        if self.assert_policy == "exit":
            raise SystemExit(1)
        raise ConsoleAssertionError(message)

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def group(self, *args: Any) -> None:
        """Open a group; the header is already indented."""
        message = format_message(args)
        with self._lock:
            self.state.indent()
        self._emit(Severity.INFO, message)

    def group_collapsed(self, *args: Any) -> None:
        """Open a group; the header stays at the outer level."""
        self._emit(Severity.INFO, format_message(args))
        with self._lock:
            self.state.indent()

    def group_end(self) -> None:
        with self._lock:
            self.state.dedent()

    # ------------------------------------------------------------------
    # Timers
    # ------------------------------------------------------------------

    def time(self, label: str) -> None:
        """Start (or restart) the timer called ``label``."""
        if not isinstance(label, str):
            raise InvalidLabelError(label)
        now = self.clock()
        with self._lock:
            self.state.timers[label] = now

    def time_end(self, label: str) -> None:
        """Stop the timer called ``label`` and log its elapsed milliseconds."""
        now = self.clock()
        with self._lock:
            try:
                started = self.state.timers.pop(label)
            except (KeyError, TypeError):
                raise TimerNotFoundError(label) from None
        elapsed = max(0, int(now - started))
        self._emit(Severity.INFO, sprintf("%s: %dms", label, elapsed))

    # ------------------------------------------------------------------
    # Stack traces and input
    # ------------------------------------------------------------------

    def trace(self, *args: Any) -> None:
        """Log the message followed by the caller's stack."""
        message = format_message(args)
        stack = traceback.format_stack(sys._getframe(1))
        lines = (f"Trace: {message}\n" + "".join(stack)).split("\n")
        while lines and not lines[-1]:
            lines.pop()
        for line in lines:
            self._emit(Severity.INFO, line)

    def getline(self, prompt: str = "") -> str:
        """Read one line of input from the host."""
        if self.line_reader is None:
            raise ConsoleError("getline is not available")
        return self.line_reader(prompt)

    def reset(self) -> None:
        """Close all groups and discard running timers."""
        with self._lock:
            self.state.reset()

    # Names used by scripts.
    debugLines = debug_lines
    infoLines = info_lines
    logLines = log_lines
    warnLines = warn_lines
    errorLines = error_lines
    groupCollapsed = group_collapsed
    groupEnd = group_end
    timeEnd = time_end


# ``assert`` is a keyword, so it can only be reached through getattr.
setattr(ScriptConsole, "assert", ScriptConsole.assert_)


__all__ = ["AssertPolicy", "DEFAULT_INDENT", "ScriptConsole", "monotonic_ms"]
