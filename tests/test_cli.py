"""Tests for the scriptconsole command line."""

from __future__ import annotations

import pathlib

import pytest
from typer.testing import CliRunner

from scriptconsole import __version__
from scriptconsole.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SCRIPTCONSOLE_INDENT",
        "SCRIPTCONSOLE_SINK",
        "SCRIPTCONSOLE_LOGGER",
        "SCRIPTCONSOLE_LOG_LEVEL",
        "SCRIPTCONSOLE_ASSERT_POLICY",
        "SCRIPTCONSOLE_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


def _script(tmp_path: pathlib.Path, body: str) -> str:
    path = tmp_path / "job.py"
    path.write_text(body, encoding="utf-8")
    return str(path)


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"scriptconsole {__version__}" in result.output


def test_run_script_with_groups(tmp_path: pathlib.Path) -> None:
    script = _script(
        tmp_path,
        'console.group("A")\nconsole.info("B")\nconsole.groupEnd()\nconsole.info("C")\n',
    )

    result = runner.invoke(app, ["run", script])

    assert result.exit_code == 0
    assert "  A\n  B\nC\n" in result.output


def test_run_custom_indent(tmp_path: pathlib.Path) -> None:
    script = _script(tmp_path, 'console.groupCollapsed("A")\nconsole.info("B")\n')

    result = runner.invoke(app, ["run", script, "--indent", "    "])

    assert result.exit_code == 0
    assert "A\n    B\n" in result.output


def test_run_failed_assert(tmp_path: pathlib.Path) -> None:
    script = _script(tmp_path, 'getattr(console, "assert")(False, "bad %d", 1)\n')

    result = runner.invoke(app, ["run", script])

    assert result.exit_code == 1
    assert "bad 1\n" in result.output
    assert "Assertion failed: bad 1" in result.output


def test_run_failed_assert_exit_policy(tmp_path: pathlib.Path) -> None:
    script = _script(tmp_path, 'console.assert_(False, "halt")\nconsole.info("unreachable")\n')

    result = runner.invoke(app, ["run", script, "--assert-policy", "exit"])

    assert result.exit_code == 1
    assert "halt" in result.output
    assert "unreachable" not in result.output


def test_run_script_error(tmp_path: pathlib.Path) -> None:
    script = _script(tmp_path, 'console.timeEnd("never")\n')

    result = runner.invoke(app, ["run", script])

    assert result.exit_code == 1
    assert "Error: No such label: never" in result.output


def test_run_logging_sink(tmp_path: pathlib.Path) -> None:
    script = _script(tmp_path, 'console.warn("disk at %d%%", 91)\n')

    result = runner.invoke(app, ["run", script, "--sink", "logging"])

    assert result.exit_code == 0
    assert "disk at 91%" in result.output


def test_run_invalid_sink(tmp_path: pathlib.Path) -> None:
    script = _script(tmp_path, 'console.info("x")\n')

    result = runner.invoke(app, ["run", script, "--sink", "syslog"])

    assert result.exit_code == 2
    assert "invalid configuration" in result.output


def test_run_missing_script(tmp_path: pathlib.Path) -> None:
    result = runner.invoke(app, ["run", str(tmp_path / "absent.py")])

    assert result.exit_code == 2


def test_run_rejects_memory_sink(tmp_path: pathlib.Path) -> None:
    script = _script(tmp_path, 'console.info("swallowed")\n')

    result = runner.invoke(app, ["run", script, "--sink", "memory"])

    assert result.exit_code == 2
    assert "memory sink" in result.output
    assert "swallowed" not in result.output
