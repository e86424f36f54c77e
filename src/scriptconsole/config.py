"""Console configuration and wiring."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.console import Console

from .console import ScriptConsole
from .sinks import LoggingSink, LogSink, MemorySink, RichSink

SinkName = Literal["rich", "logging", "memory"]


class ConsoleConfig(BaseModel):
    """Configuration for a script console."""

    indent_unit: str = Field(
        default="  ",
        description="Prefix added per open group",
    )
    sink: SinkName = Field(
        default="rich",
        description="Where console lines are written",
    )
    logger_name: str = Field(
        default="scriptconsole",
        description="Logger used by the logging sink",
    )
    log_level: Literal["trace", "debug", "info", "warning", "error"] = Field(
        default="info",
        description="Threshold applied when the CLI configures logging",
    )
    assert_policy: Literal["raise", "exit"] = Field(
        default="raise",
        description="What a failed console.assert does",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("indent_unit")
    @classmethod
    def _check_indent(cls, value: str) -> str:
        if not value or value.strip():
            raise ValueError("indent_unit must be non-empty whitespace")
        return value

    @classmethod
    def from_env(cls) -> "ConsoleConfig":
        """Create config from environment variables."""
        values: dict[str, object] = {
            "debug": os.getenv("SCRIPTCONSOLE_DEBUG", "").lower() in ("1", "true", "yes"),
        }
        for field_name, env_name in (
            ("indent_unit", "SCRIPTCONSOLE_INDENT"),
            ("sink", "SCRIPTCONSOLE_SINK"),
            ("logger_name", "SCRIPTCONSOLE_LOGGER"),
            ("log_level", "SCRIPTCONSOLE_LOG_LEVEL"),
            ("assert_policy", "SCRIPTCONSOLE_ASSERT_POLICY"),
        ):
            env_value = os.getenv(env_name)
            if env_value is not None:
                values[field_name] = env_value
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ValueError(exc) from exc


def build_sink(config: ConsoleConfig, console: Console | None = None) -> LogSink:
    """Create the sink named by ``config.sink``."""
    if config.sink == "logging":
        return LoggingSink(config.logger_name)
    if config.sink == "memory":
        return MemorySink()
    return RichSink(console)


def create_console(
    config: ConsoleConfig | None = None,
    *,
    sink: LogSink | None = None,
    console: Console | None = None,
    line_reader: Callable[[str], str] | None = None,
    clock: Callable[[], float] | None = None,
) -> ScriptConsole:
    """Build a ScriptConsole from configuration.

    Args:
        config: Console configuration (uses env vars if not provided)
        sink: Explicit sink, overrides ``config.sink``
        console: Rich console for the rich sink
        line_reader: Backs console.getline()
        clock: Millisecond time source

    Returns:
        A ready console with fresh state
    """
    config = config or ConsoleConfig.from_env()
    return ScriptConsole(
        sink or build_sink(config, console),
        indent_unit=config.indent_unit,
        assert_policy=config.assert_policy,
        clock=clock,
        line_reader=line_reader,
    )


__all__ = ["ConsoleConfig", "SinkName", "build_sink", "create_console"]
