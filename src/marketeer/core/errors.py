# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : errors.py
#   file_relpath : src/marketeer/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Error taxonomy for the unlocker.

Library code signals failures through `ErrorKind` values recorded on the
processing context; the exception classes below exist for the few places where
raising is the natural contract (configuration loading, cancellation
checkpoints, codec helpers used outside the pipeline).
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Coarse failure categories, one per way a run can abort."""

    ARGUMENT = "argument"
    CONFIG = "config"
    NOT_FOUND = "not-found"
    PERMISSION = "permission"
    IO = "io"
    FORMAT = "format"
    CANCELLED = "cancelled"


class MarketeerError(Exception):
    """Base class for all unlocker errors."""

    kind: ErrorKind = ErrorKind.IO


class ConfigError(MarketeerError, ValueError):
    """Configuration file is unreadable, malformed, or holds invalid values."""

    kind = ErrorKind.CONFIG


class SaveFormatError(MarketeerError):
    """The save file is not a valid gzip stream or not well-formed XML."""

    kind = ErrorKind.FORMAT


class OperationCancelledError(MarketeerError):
    """A cancellation request was observed at an I/O checkpoint."""

    kind = ErrorKind.CANCELLED


def classify_os_error(exc: OSError) -> ErrorKind:
    """Map an ``OSError`` to the most specific `ErrorKind`.

    Args:
        exc (OSError): The error raised by a file-system operation.

    Returns:
        ErrorKind: ``NOT_FOUND``, ``PERMISSION`` or the generic ``IO``.
    """
    if isinstance(exc, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, PermissionError):
        return ErrorKind.PERMISSION
    return ErrorKind.IO
