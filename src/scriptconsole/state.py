"""Mutable state for a single console session."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ConsoleState:
    """Group nesting depth and running timers of one console."""

    depth: int = 0
    timers: dict[str, float] = field(default_factory=dict)

    def indent(self) -> None:
        self.depth += 1

    def dedent(self) -> None:
        # Unbalanced groupEnd calls stop at the outermost level.
        if self.depth > 0:
            self.depth -= 1

    def prefix(self, unit: str) -> str:
        """Return the indentation prefix for the current depth."""
        return unit * self.depth

    def reset(self) -> None:
        """Drop all groups and timers."""
        self.depth = 0
        self.timers.clear()


__all__ = ["ConsoleState"]
