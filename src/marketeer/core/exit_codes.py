# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : exit_codes.py
#   file_relpath : src/marketeer/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Exit codes for the unlocker CLI.

Values follow the BSD `sysexits` convention where practical. ``WOULD_CHANGE=2``
signals a dry run that found marketeers to unlock, and ``CANCELLED=130``
mirrors the shell convention for a SIGINT-terminated process.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the unlocker CLI.

    Attributes:
        SUCCESS: Successful execution (also used for argument-count misuse).
        FAILURE: Generic failure.
        WOULD_CHANGE: Dry run: marketeers would be unlocked without ``--dry-run``.
        USAGE_ERROR: Conflicting or invalid options. Mirrors ``EX_USAGE (64)``.
        FORMAT_ERROR: Invalid gzip stream or malformed XML. Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid configuration file. Mirrors ``EX_CONFIG (78)``.
        CANCELLED: Run aborted by a cancellation request (Ctrl-C).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    FORMAT_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    CANCELLED = 130

