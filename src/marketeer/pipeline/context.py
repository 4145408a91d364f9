# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : context.py
#   file_relpath : src/marketeer/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Processing context for the unlock pipeline.

A `ProcessingContext` is the complete, mutable state of one run. It is created
by the caller and passed explicitly to every step, so no module-level state is
involved. It carries:

- the input path, the frozen `Config` and the `CancellationToken`;
- per-stage status (`SaveProcessingStatus`) and the `ErrorKind` of a failure;
- the in-memory buffers (decompressed bytes, element tree, serialized bytes);
- the per-marketeer reports and collected diagnostics.

Steps never raise for expected failures: they call `ProcessingContext.fail`,
which records the error kind and halts the flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from marketeer.config.logging import get_logger
from marketeer.core.cancellation import CancellationToken
from marketeer.core.diagnostics import Diagnostic, DiagnosticLevel
from marketeer.pipeline.status import SaveProcessingStatus
from marketeer.pipeline.steps.unlocker import MarketeerReport, UnlockOutcome

if TYPE_CHECKING:
    import io
    import xml.etree.ElementTree as ET

    from marketeer.config import Config
    from marketeer.config.logging import MarketeerLogger
    from marketeer.core.errors import ErrorKind
    from marketeer.pipeline.steps.base import BaseStep

logger: MarketeerLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "ProcessingContext",
]


@dataclass
class FlowControl:
    """Execution flow control for the current run."""

    halt: bool = False
    reason: str = ""
    at_step: str = ""  # step name that requested the halt


@dataclass
class ProcessingContext:
    """Mutable state for processing a single save file.

    Attributes:
        path (Path): The save file, read and rewritten in place.
        config (Config): Effective configuration.
        cancel (CancellationToken): Cooperative cancellation handle.
        status (SaveProcessingStatus): Per-stage status.
        flow (FlowControl): Halt flag, reason and originating step.
        error_kind (ErrorKind | None): Category of the failure that halted the run.
        steps (list[str]): Names of the steps invoked, in order.
        decompressed (io.BytesIO | None): Decompressed document, positioned at 0.
        tree (ET.ElementTree | None): Parsed save document.
        serialized (io.BytesIO | None): Serialized document, positioned at 0.
        marketeers (list[MarketeerReport]): One report per marketeer, document order.
        bytes_read (int): Decompressed size in bytes.
        bytes_written (int): Uncompressed bytes streamed into the output file.
        diagnostics (list[Diagnostic]): Info and error messages.
    """

    path: Path
    config: Config
    cancel: CancellationToken = field(default_factory=CancellationToken)
    status: SaveProcessingStatus = field(default_factory=SaveProcessingStatus)
    flow: FlowControl = field(default_factory=FlowControl)
    error_kind: ErrorKind | None = None
    steps: list[str] = field(default_factory=list)

    decompressed: io.BytesIO | None = None
    tree: ET.ElementTree | None = None
    serialized: io.BytesIO | None = None

    marketeers: list[MarketeerReport] = field(default_factory=list)
    bytes_read: int = 0
    bytes_written: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @classmethod
    def bootstrap(
        cls,
        *,
        path: Path | str,
        config: Config,
        cancel: CancellationToken | None = None,
    ) -> ProcessingContext:
        """Create a fresh context for ``path``.

        Args:
            path (Path | str): The save file to process.
            config (Config): Effective configuration.
            cancel (CancellationToken | None): Cancellation handle; a new one if None.

        Returns:
            ProcessingContext: Newly created context instance.
        """
        return cls(path=Path(path), config=config, cancel=cancel or CancellationToken())

    @property
    def backup_path(self) -> Path:
        """Sibling backup path: the file name with the backup suffix appended."""
        return self.path.with_name(self.path.name + self.config.backup_suffix)

    @property
    def is_halted(self) -> bool:
        """Whether a step requested that processing stop."""
        return self.flow.halt

    @property
    def found_count(self) -> int:
        """Number of marketeer entities found in the document."""
        return len(self.marketeers)

    @property
    def unlocked_count(self) -> int:
        """Number of marketeers unlocked by this run."""
        return sum(1 for m in self.marketeers if m.outcome == UnlockOutcome.UNLOCKED)

    @property
    def succeeded(self) -> bool:
        """True when the run completed without a recorded failure."""
        return self.error_kind is None and not self.flow.halt

    def request_halt(self, reason: str, at_step: BaseStep) -> None:
        """Request a graceful stop for the rest of the pipeline.

        Args:
            reason (str): Short human-readable reason for halting.
            at_step (BaseStep): Step requesting the halt.
        """
        logger.info("Flow halted in %s: %s", at_step.name, reason)
        self.flow = FlowControl(halt=True, reason=reason, at_step=at_step.name)

    def fail(self, kind: ErrorKind, reason: str, at_step: BaseStep) -> None:
        """Record a failure of the given kind and halt the flow.

        Args:
            kind (ErrorKind): Failure category, mapped to an exit code by the CLI.
            reason (str): Human-readable description.
            at_step (BaseStep): Step reporting the failure.
        """
        self.error_kind = kind
        self.add_error(reason)
        self.request_halt(reason, at_step)

    def release_buffers(self) -> None:
        """Drop the in-memory document and buffers; reports are kept."""
        self.decompressed = None
        self.tree = None
        self.serialized = None

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.INFO, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.ERROR, message))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly summary of this context for logging."""
        return {
            "path": str(self.path),
            "status": self.status.to_dict(),
            "halt": self.flow.halt,
            "halt_reason": self.flow.reason,
            "at_step": self.flow.at_step,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "found": self.found_count,
            "unlocked": self.unlocked_count,
            "bytes_read": self.bytes_read,
            "bytes_written": self.bytes_written,
            "steps": list(self.steps),
        }
