# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : errors.py
#   file_relpath : src/marketeer/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Exceptions raised by the CLI to end a run with a specific exit code.

The pipeline records failures as `ErrorKind` values; `error_for_kind` turns the
recorded kind into one of these `click.ClickException` subclasses so Click
prints the message and exits with the matching `ExitCode`.
"""

from __future__ import annotations

from typing import IO, Any

import click

from marketeer.core.errors import ErrorKind
from marketeer.core.exit_codes import ExitCode


class MarketeerCliError(click.ClickException):
    """Base class for all CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the project console when one is available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class MarketeerUsageError(MarketeerCliError):
    """Invalid or conflicting command-line options."""

    exit_code = ExitCode.USAGE_ERROR


class MarketeerConfigError(MarketeerCliError):
    """Missing, malformed or invalid configuration file."""

    exit_code = ExitCode.CONFIG_ERROR


class MarketeerFileNotFoundError(MarketeerCliError):
    """The save file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MarketeerPermissionDeniedError(MarketeerCliError):
    """Insufficient permissions to read the save or write the save/backup."""

    exit_code = ExitCode.PERMISSION_DENIED


class MarketeerIOError(MarketeerCliError):
    """Other I/O failure while reading or writing."""

    exit_code = ExitCode.IO_ERROR


class MarketeerFormatError(MarketeerCliError):
    """The save file is not gzip-compressed XML."""

    exit_code = ExitCode.FORMAT_ERROR


class MarketeerCancelledError(MarketeerCliError):
    """The run was cancelled (Ctrl-C)."""

    exit_code = ExitCode.CANCELLED


_ERROR_BY_KIND: dict[ErrorKind, type[MarketeerCliError]] = {
    ErrorKind.ARGUMENT: MarketeerUsageError,
    ErrorKind.CONFIG: MarketeerConfigError,
    ErrorKind.NOT_FOUND: MarketeerFileNotFoundError,
    ErrorKind.PERMISSION: MarketeerPermissionDeniedError,
    ErrorKind.IO: MarketeerIOError,
    ErrorKind.FORMAT: MarketeerFormatError,
    ErrorKind.CANCELLED: MarketeerCancelledError,
}


def error_for_kind(kind: ErrorKind | None, message: str) -> MarketeerCliError:
    """Return the CLI exception reporting a failure of ``kind``."""
    if kind is None:
        return MarketeerCliError(message)
    return _ERROR_BY_KIND.get(kind, MarketeerCliError)(message)
