# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : api.py
#   file_relpath : src/marketeer/api.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Public API for unlocking black marketeers in an X4 save file.

Example:
    ```python
    from marketeer.api import unlock_save

    ctx = unlock_save("quicksave.xml.gz")
    if ctx.succeeded:
        print(f"{ctx.unlocked_count} of {ctx.found_count} marketeers unlocked")
    else:
        print(ctx.error_kind, ctx.flow.reason)
    ```

The function never raises for expected failures (missing file, bad gzip,
malformed XML, cancellation); inspect ``ctx.error_kind`` instead.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from marketeer.config import Config, MutableConfig
from marketeer.pipeline import runner
from marketeer.pipeline.context import ProcessingContext
from marketeer.pipeline.pipelines import UNLOCK_PIPELINE

if TYPE_CHECKING:
    from pathlib import Path

    from marketeer.core.cancellation import CancellationToken

__all__ = ["unlock_save"]


def unlock_save(
    path: Path | str,
    *,
    config: Config | None = None,
    cancel: CancellationToken | None = None,
    dry_run: bool | None = None,
) -> ProcessingContext:
    """Back up, decompress, unlock and rewrite a save file.

    Args:
        path (Path | str): The gzip-compressed save file; rewritten in place.
        config (Config | None): Effective configuration; defaults when None.
        cancel (CancellationToken | None): Cancellation handle checked at I/O checkpoints.
        dry_run (bool | None): Override ``config.dry_run`` when not None.

    Returns:
        ProcessingContext: The final context with statuses, reports and diagnostics.
    """
    cfg: Config = config or MutableConfig.from_defaults().freeze()
    if dry_run is not None and dry_run != cfg.dry_run:
        cfg = replace(cfg, dry_run=dry_run)

    ctx = ProcessingContext.bootstrap(path=path, config=cfg, cancel=cancel)
    return runner.run(ctx, UNLOCK_PIPELINE)
