# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : compressor.py
#   file_relpath : src/marketeer/pipeline/steps/compressor.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Compressor step: gzip the serialized document back into the save file.

This is the only step that modifies the save file. The file is overwritten in
place with no atomic rename, so a failure mid-write can leave it corrupt; the
backup taken by the backup step is the safeguard.

Sinks
-----
- FileSystemSink: streams the compressed document into ``ctx.path``.
- NullSink: writes nothing (dry run).

Axes written:
  - compress

Sets:
  - CompressStatus: {WRITTEN, SKIPPED, FAILED, CANCELLED}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from marketeer.codec import compress_to_file
from marketeer.config.logging import get_logger
from marketeer.core.errors import OperationCancelledError, classify_os_error
from marketeer.pipeline.status import Axis, CompressStatus, SerializeStatus
from marketeer.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from marketeer.config.logging import MarketeerLogger
    from marketeer.pipeline.context import ProcessingContext

logger: MarketeerLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a sink write."""

    status: CompressStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for sinks used by the compressor step."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Write ``ctx.serialized`` to the sink and report the result."""
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """No-op write for dry-run mode."""
        return WriteResult(status=CompressStatus.SKIPPED)


class FileSystemSink:
    """Sink that gzips the serialized document into ``ctx.path``."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Compress ``ctx.serialized`` into the save file.

        Exceptions from the codec propagate to the step, which classifies them.

        Args:
            ctx (ProcessingContext): Context holding the serialized document.

        Returns:
            WriteResult: ``WRITTEN`` with the number of uncompressed bytes streamed.
        """
        assert ctx.serialized is not None
        written = compress_to_file(
            ctx.serialized,
            ctx.path,
            compression_level=ctx.config.compression_level,
            chunk_size=ctx.config.chunk_size,
            cancel=ctx.cancel,
        )
        return WriteResult(status=CompressStatus.WRITTEN, bytes_written=written)


def select_sink(ctx: ProcessingContext) -> WriteSink:
    """Return `NullSink` for dry runs, otherwise `FileSystemSink`."""
    if ctx.config.dry_run:
        logger.debug("Selected NULL sink (dry run)")
        return NullSink()
    logger.debug("Selected file system sink")
    return FileSystemSink()


class CompressStep(BaseStep):
    """Write the serialized document through the selected sink."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.COMPRESS)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Proceed only when serialization succeeded."""
        return (
            super().may_proceed(ctx)
            and ctx.status.serialize == SerializeStatus.OK
            and ctx.serialized is not None
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Compress and write the save file.

        Args:
            ctx (ProcessingContext): The processing context for the current run.
        """
        sink: WriteSink = select_sink(ctx)
        try:
            result = sink.write(ctx=ctx)
        except OperationCancelledError as exc:
            ctx.status.compress = CompressStatus.CANCELLED
            ctx.fail(exc.kind, f"{exc}; {ctx.path} may be incomplete", self)
            return
        except OSError as exc:
            ctx.status.compress = CompressStatus.FAILED
            ctx.fail(classify_os_error(exc), f"Cannot write {ctx.path}: {exc}", self)
            return

        ctx.status.compress = result.status
        ctx.bytes_written = result.bytes_written
