# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : parser.py
#   file_relpath : src/marketeer/pipeline/steps/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Parser step: build an element tree from the decompressed document.

Comments and processing instructions inside the root element are kept so they
survive the rewrite.

Axes written:
  - parse

Sets:
  - ParseStatus: {OK, MALFORMED, CANCELLED}
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from marketeer.config.logging import get_logger
from marketeer.core.errors import ErrorKind, OperationCancelledError
from marketeer.pipeline.status import Axis, DecompressStatus, ParseStatus
from marketeer.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from marketeer.config.logging import MarketeerLogger
    from marketeer.pipeline.context import ProcessingContext

logger: MarketeerLogger = get_logger(__name__)


def make_parser() -> ET.XMLParser:
    """Return a parser that keeps comments and processing instructions in the tree."""
    return ET.XMLParser(target=ET.TreeBuilder(insert_comments=True, insert_pis=True))


class ParseStep(BaseStep):
    """Parse ``ctx.decompressed`` into ``ctx.tree`` and release the raw buffer."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.PARSE)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Proceed only when decompression produced a buffer."""
        return (
            super().may_proceed(ctx)
            and ctx.status.decompress == DecompressStatus.OK
            and ctx.decompressed is not None
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Parse the document.

        Args:
            ctx (ProcessingContext): The processing context for the current run.
        """
        assert ctx.decompressed is not None  # guaranteed by may_proceed()
        try:
            ctx.cancel.raise_if_cancelled("parse")
            tree = ET.parse(ctx.decompressed, parser=make_parser())
        except OperationCancelledError as exc:
            ctx.status.parse = ParseStatus.CANCELLED
            ctx.fail(exc.kind, str(exc), self)
            return
        except ET.ParseError as exc:
            ctx.status.parse = ParseStatus.MALFORMED
            ctx.fail(ErrorKind.FORMAT, f"{ctx.path} is not well-formed XML: {exc}", self)
            return

        ctx.tree = tree
        ctx.decompressed = None
        ctx.status.parse = ParseStatus.OK
        logger.debug("Parsed document with root <%s>", tree.getroot().tag)
