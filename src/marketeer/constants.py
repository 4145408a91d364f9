# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : constants.py
#   file_relpath : src/marketeer/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Marketeer Unlocker Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    MARKETEER_VERSION: str = get_version("x4-marketeer-unlocker")
except PackageNotFoundError:  # running from a source checkout
    MARKETEER_VERSION = "0.0.0"

PROG_NAME: str = "x4-marketeer-unlocker"
USAGE_TEXT: str = f"Usage: {PROG_NAME} <path to X4 save file>"

# Save-file sentinels
DEFAULT_STOCK_ID: str = "default_shadyguy"
UNLOCK_FLAG: str = "tradesvisible"
FLAGS_DELIMITER: str = "|"
UNKNOWN_VALUE: str = "unknown"

COMPONENT_TAG: str = "component"
TRAITS_TAG: str = "traits"
STOCKID_ATTR: str = "stockid"
FLAGS_ATTR: str = "flags"
OWNER_ATTR: str = "owner"
NAME_ATTR: str = "name"
CODE_ATTR: str = "code"

BACKUP_SUFFIX: str = ".bak"
DEFAULT_COMPRESSION_LEVEL: int = 9
DEFAULT_CHUNK_SIZE: int = 64 * 1024

# Environment
LOG_LEVEL_ENV: str = "MARKETEER_LOG_LEVEL"

# Configuration file table when embedded in pyproject-style files
TOOL_TABLE: tuple[str, str] = ("tool", "marketeer")
