# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : decompressor.py
#   file_relpath : src/marketeer/pipeline/steps/decompressor.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Decompressor step: drain the gzip save file into memory.

Axes written:
  - decompress

Sets:
  - DecompressStatus: {OK, INVALID, TRUNCATED, UNREADABLE, CANCELLED}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marketeer.codec import TruncatedSaveError, decompress_file
from marketeer.config.logging import get_logger
from marketeer.core.errors import OperationCancelledError, SaveFormatError, classify_os_error
from marketeer.pipeline.status import Axis, DecompressStatus
from marketeer.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from marketeer.config.logging import MarketeerLogger
    from marketeer.pipeline.context import ProcessingContext

logger: MarketeerLogger = get_logger(__name__)


class DecompressStep(BaseStep):
    """Load the decompressed document into ``ctx.decompressed``."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.DECOMPRESS)

    def run(self, ctx: ProcessingContext) -> None:
        """Decompress ``ctx.path``; no partial result is kept on failure.

        Args:
            ctx (ProcessingContext): The processing context for the current run.
        """
        try:
            buffer = decompress_file(
                ctx.path,
                chunk_size=ctx.config.chunk_size,
                cancel=ctx.cancel,
            )
        except TruncatedSaveError as exc:
            ctx.status.decompress = DecompressStatus.TRUNCATED
            ctx.fail(exc.kind, str(exc), self)
            return
        except SaveFormatError as exc:
            ctx.status.decompress = DecompressStatus.INVALID
            ctx.fail(exc.kind, str(exc), self)
            return
        except OperationCancelledError as exc:
            ctx.status.decompress = DecompressStatus.CANCELLED
            ctx.fail(exc.kind, str(exc), self)
            return
        except OSError as exc:
            ctx.status.decompress = DecompressStatus.UNREADABLE
            ctx.fail(classify_os_error(exc), f"Cannot read {ctx.path}: {exc}", self)
            return

        ctx.decompressed = buffer
        with buffer.getbuffer() as view:
            ctx.bytes_read = view.nbytes
        ctx.status.decompress = DecompressStatus.OK
