# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : runner.py
#   file_relpath : src/marketeer/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Run a pipeline sequentially over one processing context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from marketeer.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from marketeer.config.logging import MarketeerLogger
    from marketeer.pipeline.context import ProcessingContext
    from marketeer.pipeline.steps.base import BaseStep

logger: MarketeerLogger = get_logger(__name__)


def run(
    ctx: ProcessingContext,
    steps: Sequence[BaseStep],
    *,
    prune: bool = True,
) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Every step is invoked, even after a halt, so that each one records that it
    did not proceed; the gate in `BaseStep.may_proceed` keeps halted runs inert.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered pipeline steps.
        prune (bool): Release the in-memory document once done (default: `True`).

    Returns:
        ProcessingContext: The final processing context.
    """
    logger.info("Processing %s (dry_run=%s)", ctx.path, ctx.config.dry_run)
    for step in steps:
        ctx = step(ctx)

    if prune:
        ctx.release_buffers()

    logger.debug("Final context: %s", ctx.to_dict())
    return ctx
