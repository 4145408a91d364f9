# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : base.py
#   file_relpath : src/marketeer/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run?

Subclasses override `may_proceed()` and `run()`. The default gate refuses to
run once the flow has been halted, which turns the first failure into an
``Aborted`` run without any exception crossing the step boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from marketeer.config.logging import get_logger

if TYPE_CHECKING:
    from marketeer.config.logging import MarketeerLogger
    from marketeer.pipeline.context import ProcessingContext
    from marketeer.pipeline.status import Axis

logger: MarketeerLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Attributes:
        name (str): Stable step identifier for logs and flow control.
        axis (Axis): The status axis this step writes.
    """

    name: str
    axis: Axis

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (ProcessingContext): The mutable processing context.

        Returns:
            ProcessingContext: The same context instance after mutation.
        """
        ctx.steps.append(self.name)

        if self.may_proceed(ctx):
            logger.info("Pipeline step %s - running", self.name)
            self.run(ctx)
            if ctx.is_halted:
                logger.info("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.info("Pipeline step %s may not proceed", self.name)

        logger.trace("Status after %s: %s", self.name, ctx.status.to_dict())
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context.

        Default: run unless the flow has been halted.

        Args:
            ctx (ProcessingContext): The mutable processing context.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        return not ctx.is_halted

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place.

        Args:
            ctx (ProcessingContext): The mutable processing context.
        """
        raise NotImplementedError
