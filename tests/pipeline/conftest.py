# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Pipeline test helpers: build contexts and run individual steps."""

from __future__ import annotations

from typing import TYPE_CHECKING

from marketeer.pipeline.context import ProcessingContext
from marketeer.pipeline.steps.backup import BackupStep
from marketeer.pipeline.steps.compressor import CompressStep
from marketeer.pipeline.steps.decompressor import DecompressStep
from marketeer.pipeline.steps.parser import ParseStep
from marketeer.pipeline.steps.serializer import SerializeStep
from marketeer.pipeline.steps.unlocker import UnlockStep
from tests.conftest import make_config

if TYPE_CHECKING:
    from pathlib import Path

    from marketeer.config import Config
    from marketeer.core.cancellation import CancellationToken


def make_pipeline_context(
    path: Path,
    config: Config | None = None,
    *,
    cancel: CancellationToken | None = None,
) -> ProcessingContext:
    """Return a fresh context for ``path`` (defaults config when None)."""
    return ProcessingContext.bootstrap(path=path, config=config or make_config(), cancel=cancel)


def run_backup(ctx: ProcessingContext) -> ProcessingContext:
    """Run the backup step."""
    return BackupStep()(ctx)


def run_decompressor(ctx: ProcessingContext) -> ProcessingContext:
    """Run the decompress step."""
    return DecompressStep()(ctx)


def run_parser(ctx: ProcessingContext) -> ProcessingContext:
    """Run the parse step."""
    return ParseStep()(ctx)


def run_unlocker(ctx: ProcessingContext) -> ProcessingContext:
    """Run the unlock step."""
    return UnlockStep()(ctx)


def run_serializer(ctx: ProcessingContext) -> ProcessingContext:
    """Run the serialize step."""
    return SerializeStep()(ctx)


def run_compressor(ctx: ProcessingContext) -> ProcessingContext:
    """Run the compress step."""
    return CompressStep()(ctx)


def run_load(ctx: ProcessingContext) -> ProcessingContext:
    """Run decompress → parse (no backup)."""
    return run_parser(run_decompressor(ctx))
