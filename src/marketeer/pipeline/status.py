# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : status.py
#   file_relpath : src/marketeer/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Status enums for each stage of the unlock pipeline.

Every step writes exactly one axis of `SaveProcessingStatus`. Values are
human-readable strings; compare with ``==``, not ``is``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from yachalk import chalk

from marketeer.core.colored_enum import ColoredStrEnum


class Axis(str, Enum):
    """Pipeline axes, one per stage."""

    BACKUP = "backup"
    DECOMPRESS = "decompress"
    PARSE = "parse"
    UNLOCK = "unlock"
    SERIALIZE = "serialize"
    COMPRESS = "compress"


class BackupStatus(ColoredStrEnum):
    """Outcome of the backup guard."""

    PENDING = ("backup pending", chalk.gray)
    CREATED = ("backup created", chalk.green)
    EXISTS = ("backup already present", chalk.blue)
    SKIPPED = ("backup skipped (dry run)", chalk.yellow)
    FAILED = ("backup failed", chalk.red_bright)


class DecompressStatus(ColoredStrEnum):
    """Outcome of draining the gzip stream."""

    PENDING = ("decompression pending", chalk.gray)
    OK = ("decompressed", chalk.green)
    INVALID = ("not a gzip stream", chalk.red)
    TRUNCATED = ("truncated gzip stream", chalk.red)
    UNREADABLE = ("read error", chalk.red_bright)
    CANCELLED = ("cancelled", chalk.yellow)


class ParseStatus(ColoredStrEnum):
    """Outcome of parsing the decompressed document."""

    PENDING = ("parse pending", chalk.gray)
    OK = ("parsed", chalk.green)
    MALFORMED = ("malformed XML", chalk.red)
    CANCELLED = ("cancelled", chalk.yellow)


class UnlockStatus(ColoredStrEnum):
    """Outcome of the document mutation."""

    PENDING = ("unlock pending", chalk.gray)
    CHANGED = ("marketeers unlocked", chalk.green)
    UNCHANGED = ("nothing to unlock", chalk.blue)


class SerializeStatus(ColoredStrEnum):
    """Outcome of serializing the mutated document."""

    PENDING = ("serialization pending", chalk.gray)
    OK = ("serialized", chalk.green)
    CANCELLED = ("cancelled", chalk.yellow)


class CompressStatus(ColoredStrEnum):
    """Outcome of writing the compressed save file."""

    PENDING = ("compression pending", chalk.gray)
    WRITTEN = ("save written", chalk.green)
    SKIPPED = ("write skipped (dry run)", chalk.yellow)
    FAILED = ("write failed", chalk.red_bright)
    CANCELLED = ("cancelled", chalk.yellow)


@dataclass
class SaveProcessingStatus:
    """Per-axis status for one run; the single source of truth for outcomes."""

    backup: BackupStatus = BackupStatus.PENDING
    decompress: DecompressStatus = DecompressStatus.PENDING
    parse: ParseStatus = ParseStatus.PENDING
    unlock: UnlockStatus = UnlockStatus.PENDING
    serialize: SerializeStatus = SerializeStatus.PENDING
    compress: CompressStatus = CompressStatus.PENDING

    def to_dict(self) -> dict[str, str]:
        """Return a ``{axis: status name}`` mapping for logs and tests."""
        return {axis.value: getattr(self, axis.value).name for axis in Axis}
