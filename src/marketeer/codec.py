# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : codec.py
#   file_relpath : src/marketeer/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Streaming gzip helpers for X4 save files.

X4 writes its saves as a single gzip member wrapping an XML document. These
helpers stream between a file and an in-memory buffer in fixed-size chunks,
checking the cancellation token before every chunk.

Errors:
    - Not a gzip stream / corrupt deflate data: `SaveFormatError`.
    - Stream ends before the gzip trailer: `TruncatedSaveError`.
    - Cancellation: `OperationCancelledError`.
    - File-system failures propagate as ``OSError``.
"""

from __future__ import annotations

import gzip
import io
import zlib
from typing import TYPE_CHECKING, BinaryIO

from marketeer.config.logging import get_logger
from marketeer.constants import DEFAULT_CHUNK_SIZE, DEFAULT_COMPRESSION_LEVEL
from marketeer.core.errors import SaveFormatError

if TYPE_CHECKING:
    from pathlib import Path

    from marketeer.config.logging import MarketeerLogger
    from marketeer.core.cancellation import CancellationToken

logger: MarketeerLogger = get_logger(__name__)


class TruncatedSaveError(SaveFormatError):
    """The gzip stream ended before its end-of-stream marker."""


def copy_stream(
    src: BinaryIO,
    dst: BinaryIO,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    cancel: CancellationToken | None = None,
    checkpoint: str = "copy",
) -> int:
    """Copy ``src`` into ``dst`` chunk by chunk.

    Args:
        src (BinaryIO): Readable binary stream.
        dst (BinaryIO): Writable binary stream.
        chunk_size (int): Maximum bytes per read.
        cancel (CancellationToken | None): Checked before every chunk.
        checkpoint (str): Checkpoint name reported on cancellation.

    Returns:
        int: Number of bytes copied.
    """
    total = 0
    while True:
        if cancel is not None:
            cancel.raise_if_cancelled(checkpoint)
        chunk: bytes = src.read(chunk_size)
        if not chunk:
            break
        dst.write(chunk)
        total += len(chunk)
    return total


def decompress_file(
    path: Path,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    cancel: CancellationToken | None = None,
) -> io.BytesIO:
    """Decompress a gzip file into a buffer positioned at offset 0.

    Args:
        path (Path): The compressed save file.
        chunk_size (int): Streaming chunk size in bytes.
        cancel (CancellationToken | None): Cancellation handle.

    Returns:
        io.BytesIO: The fully decompressed content.

    Raises:
        SaveFormatError: If the file is not a valid gzip stream.
        TruncatedSaveError: If the stream is cut short.
    """
    buffer = io.BytesIO()
    try:
        with open(path, "rb") as fh, gzip.GzipFile(fileobj=fh, mode="rb") as gz:
            copied = copy_stream(
                gz,  # type: ignore[arg-type]
                buffer,
                chunk_size=chunk_size,
                cancel=cancel,
                checkpoint="decompress",
            )
    except gzip.BadGzipFile as exc:
        raise SaveFormatError(f"{path} is not a gzip-compressed save file: {exc}") from exc
    except zlib.error as exc:
        raise SaveFormatError(f"{path} contains corrupt compressed data: {exc}") from exc
    except EOFError as exc:
        raise TruncatedSaveError(f"{path} is truncated: {exc}") from exc

    logger.debug("Decompressed %d bytes from %s", copied, path)
    buffer.seek(0)
    return buffer


def compress_to_file(
    source: BinaryIO,
    path: Path,
    *,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    cancel: CancellationToken | None = None,
) -> int:
    """Gzip ``source`` into ``path``, replacing any existing content.

    Cancellation is checked before the file is opened, so a run cancelled at
    that point leaves it untouched. Once opened the file is truncated; there is
    no temporary file or atomic rename.

    Args:
        source (BinaryIO): Readable stream positioned at the start of the data.
        path (Path): Destination file.
        compression_level (int): gzip level, 0-9.
        chunk_size (int): Streaming chunk size in bytes.
        cancel (CancellationToken | None): Cancellation handle.

    Returns:
        int: Number of uncompressed bytes written.
    """
    if cancel is not None:
        cancel.raise_if_cancelled("compress")
    with (
        open(path, "wb") as fh,
        gzip.GzipFile(filename="", mode="wb", fileobj=fh, compresslevel=compression_level) as gz,
    ):
        written = copy_stream(
            source,
            gz,  # type: ignore[arg-type]
            chunk_size=chunk_size,
            cancel=cancel,
            checkpoint="compress",
        )
    logger.debug("Compressed %d bytes into %s", written, path)
    return written
