# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : cancellation.py
#   file_relpath : src/marketeer/core/cancellation.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Cooperative cancellation passed explicitly through the pipeline.

A `CancellationToken` is created by the caller and stored on the processing
context. Every I/O checkpoint (before a backup copy, before each streamed chunk,
before parsing and serializing) calls `CancellationToken.raise_if_cancelled`.
Nothing is rolled back: a run cancelled mid-write may leave a partially written
save file, while an existing backup is never touched.
"""

from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from marketeer.config.logging import get_logger
from marketeer.core.errors import OperationCancelledError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import FrameType

    from marketeer.config.logging import MarketeerLogger

logger: MarketeerLogger = get_logger(__name__)


class CancellationToken:
    """Thread-safe, one-shot cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self.reason: str = ""

    @property
    def cancelled(self) -> bool:
        """Whether cancellation has been requested."""
        return self._event.is_set()

    def cancel(self, reason: str = "cancelled by caller") -> None:
        """Request cancellation; later calls keep the first reason."""
        if not self._event.is_set():
            self.reason = reason
            logger.info("Cancellation requested: %s", reason)
        self._event.set()

    def raise_if_cancelled(self, checkpoint: str = "") -> None:
        """Raise `OperationCancelledError` if cancellation was requested.

        Args:
            checkpoint (str): Name of the I/O checkpoint, used in the message.

        Raises:
            OperationCancelledError: When the token has been cancelled.
        """
        if self._event.is_set():
            where = f" at {checkpoint}" if checkpoint else ""
            raise OperationCancelledError(f"Operation cancelled{where}: {self.reason}")


@contextmanager
def cancel_on_interrupt(token: CancellationToken) -> Iterator[CancellationToken]:
    """Trip ``token`` on SIGINT instead of raising ``KeyboardInterrupt``.

    The previous handler is restored on exit. Outside the main thread signal
    handlers cannot be installed; the token is then yielded unchanged.

    Args:
        token (CancellationToken): Token to cancel when Ctrl-C is pressed.

    Yields:
        CancellationToken: The same token.
    """
    if threading.current_thread() is not threading.main_thread():
        yield token
        return

    def _handler(signum: int, frame: FrameType | None) -> None:
        token.cancel("interrupted by user")

    previous: Any = signal.signal(signal.SIGINT, _handler)
    try:
        yield token
    finally:
        signal.signal(signal.SIGINT, previous)
