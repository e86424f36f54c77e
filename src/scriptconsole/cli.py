"""Command-line interface for scriptconsole.

Runs a Python script with a configured console bound to ``console``.
"""

from __future__ import annotations

import logging
import runpy
import traceback
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from scriptconsole import __version__
from scriptconsole.config import ConsoleConfig, create_console
from scriptconsole.errors import ConsoleAssertionError
from scriptconsole.sinks import LOGGING_LEVELS, Severity

console = Console()

app = typer.Typer(
    add_completion=False,
    help="scriptconsole - run scripts against a console logging facade",
)


def _load_config(**overrides: Any) -> ConsoleConfig:
    """Merge CLI overrides into the environment configuration."""
    try:
        base = ConsoleConfig.from_env()
        values = base.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ConsoleConfig(**values)
    except ValueError as exc:
        console.print(f"[red]Error: invalid configuration[/]\n{escape(str(exc))}")
        raise typer.Exit(2) from exc


def _configure_logging(config: ConsoleConfig) -> None:
    logging.basicConfig(
        level=LOGGING_LEVELS[Severity(config.log_level)],
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


@app.command(name="run")
def run(
    script: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="Python script to execute",
        ),
    ],
    sink: Annotated[
        str | None,
        typer.Option("--sink", "-s", help="Output sink: rich or logging"),
    ] = None,
    indent: Annotated[
        str | None,
        typer.Option("--indent", help="Indentation added per console.group"),
    ] = None,
    assert_policy: Annotated[
        str | None,
        typer.Option("--assert-policy", help="raise or exit on a failed console.assert"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Threshold for the logging sink"),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug mode"),
    ] = False,
) -> None:
    """Execute SCRIPT with ``console`` available as a global.

    Examples:
        scriptconsole run job.py
        scriptconsole run job.py --sink logging --log-level debug
    """
    config = _load_config(
        sink=sink,
        indent_unit=indent,
        assert_policy=assert_policy,
        log_level=log_level,
        debug=debug or None,
    )
    if config.sink == "memory":
        console.print("[red]Error: the memory sink keeps output in-process; use rich or logging[/]")
        raise typer.Exit(2)
    if config.sink == "logging":
        _configure_logging(config)

    script_console = create_console(config, console=console, line_reader=console.input)

    try:
        runpy.run_path(str(script), init_globals={"console": script_console}, run_name="__main__")
    except ConsoleAssertionError as exc:
        console.print(f"[red]Assertion failed: {escape(exc.message)}[/]")
        if config.debug:
            console.print(f"[dim]{escape(traceback.format_exc())}[/]")
        raise typer.Exit(1) from exc
    except Exception as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/]")
        if config.debug:
            console.print(f"[dim]{escape(traceback.format_exc())}[/]")
        raise typer.Exit(1) from exc


@app.callback(invoke_without_command=True)
def default_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version"),
    ] = False,
) -> None:
    """scriptconsole - run scripts against a console logging facade."""
    if version:
        console.print(f"scriptconsole {__version__}")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help(), markup=False, highlight=False)
        raise typer.Exit(0)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
