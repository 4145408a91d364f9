# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : serializer.py
#   file_relpath : src/marketeer/pipeline/steps/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Serializer step: write the element tree back to UTF-8 bytes.

No indentation or whitespace is inserted; the document is emitted as parsed,
preceded by an XML declaration.

Axes written:
  - serialize

Sets:
  - SerializeStatus: {OK, CANCELLED}
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from marketeer.config.logging import get_logger
from marketeer.core.errors import OperationCancelledError
from marketeer.pipeline.status import Axis, SerializeStatus, UnlockStatus
from marketeer.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET

    from marketeer.config.logging import MarketeerLogger
    from marketeer.pipeline.context import ProcessingContext

logger: MarketeerLogger = get_logger(__name__)


def serialize_tree(tree: ET.ElementTree) -> io.BytesIO:
    """Serialize ``tree`` without formatting into a buffer positioned at 0."""
    buffer = io.BytesIO()
    tree.write(buffer, encoding="utf-8", xml_declaration=True)
    buffer.seek(0)
    return buffer


class SerializeStep(BaseStep):
    """Serialize ``ctx.tree`` into ``ctx.serialized``."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.SERIALIZE)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Proceed once the unlock step has run on a parsed tree."""
        return (
            super().may_proceed(ctx)
            and ctx.status.unlock != UnlockStatus.PENDING
            and ctx.tree is not None
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Serialize the document.

        Args:
            ctx (ProcessingContext): The processing context for the current run.
        """
        assert ctx.tree is not None  # guaranteed by may_proceed()
        try:
            ctx.cancel.raise_if_cancelled("serialize")
        except OperationCancelledError as exc:
            ctx.status.serialize = SerializeStatus.CANCELLED
            ctx.fail(exc.kind, str(exc), self)
            return

        ctx.serialized = serialize_tree(ctx.tree)
        ctx.status.serialize = SerializeStatus.OK
        logger.debug("Serialized %d bytes", len(ctx.serialized.getvalue()))
