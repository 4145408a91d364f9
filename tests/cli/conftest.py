# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""CLI test helpers for invoking the unlocker through Click's test runner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from marketeer.cli.main import cli
from marketeer.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``argv``.

    Paths passed in ``argv`` should be absolute (``tmp_path`` based) since the
    working directory is not changed.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--dry-run", path]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
