"""scriptconsole - console logging verbs for embedded scripts.

Familiar ``console.*`` calls (info, warn, group, time, trace, ...) rendered
into text lines and handed to a pluggable log sink.
"""

from __future__ import annotations

from typing import Any

__version__ = "0.1.0"


# Lazy imports keep ``import scriptconsole`` free of rich/pydantic until needed
def __getattr__(name: str) -> Any:
    """Lazy import of submodules."""
    if name in ("ScriptConsole", "DEFAULT_INDENT"):
        from scriptconsole import console

        return getattr(console, name)
    if name in ("ConsoleConfig", "create_console"):
        from scriptconsole import config

        return getattr(config, name)
    if name in ("Severity", "LogSink", "RichSink", "LoggingSink", "MemorySink"):
        from scriptconsole import sinks

        return getattr(sinks, name)
    if name in (
        "ConsoleError",
        "ConsoleAssertionError",
        "InvalidLabelError",
        "TimerNotFoundError",
    ):
        from scriptconsole import errors

        return getattr(errors, name)
    if name == "main":
        from scriptconsole.cli import main

        return main
    raise AttributeError(f"module 'scriptconsole' has no attribute {name!r}")


__all__ = [
    "__version__",
    "ConsoleAssertionError",
    "ConsoleConfig",
    "ConsoleError",
    "DEFAULT_INDENT",
    "InvalidLabelError",
    "LogSink",
    "LoggingSink",
    "MemorySink",
    "RichSink",
    "ScriptConsole",
    "Severity",
    "TimerNotFoundError",
    "create_console",
    "main",
]
