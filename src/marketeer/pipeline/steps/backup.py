# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : backup.py
#   file_relpath : src/marketeer/pipeline/steps/backup.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Backup guard step.

Ensures a pristine copy of the save file exists before anything is modified.
The backup is the file name with the configured suffix appended
(``quicksave.xml.gz`` → ``quicksave.xml.gz.bak``). An existing backup is never
overwritten, so repeated runs keep the copy taken before the very first run.

Axes written:
  - backup

Sets:
  - BackupStatus: {CREATED, EXISTS, SKIPPED, FAILED}
"""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from marketeer.config.logging import get_logger
from marketeer.core.errors import OperationCancelledError, classify_os_error
from marketeer.pipeline.status import Axis, BackupStatus
from marketeer.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from marketeer.config.logging import MarketeerLogger
    from marketeer.pipeline.context import ProcessingContext

logger: MarketeerLogger = get_logger(__name__)


class BackupStep(BaseStep):
    """Copy the save file to its backup path unless a backup already exists."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.BACKUP)

    def run(self, ctx: ProcessingContext) -> None:
        """Create the backup, or record why none was made.

        ``shutil.copyfile`` opens the source before creating the destination, so
        a missing input fails without leaving an empty backup behind.

        Args:
            ctx (ProcessingContext): The processing context for the current run.
        """
        backup = ctx.backup_path

        if ctx.config.dry_run:
            ctx.status.backup = BackupStatus.SKIPPED
            ctx.add_info("Dry run: backup not created.")
            return

        if backup.exists():
            logger.debug("Backup %s already exists; leaving it untouched", backup)
            ctx.status.backup = BackupStatus.EXISTS
            return

        try:
            ctx.cancel.raise_if_cancelled("backup")
            shutil.copyfile(ctx.path, backup)
        except OperationCancelledError as exc:
            ctx.status.backup = BackupStatus.FAILED
            ctx.fail(exc.kind, str(exc), self)
            return
        except OSError as exc:
            ctx.status.backup = BackupStatus.FAILED
            ctx.fail(classify_os_error(exc), f"Cannot back up {ctx.path}: {exc}", self)
            return

        logger.info("Created backup %s", backup)
        ctx.status.backup = BackupStatus.CREATED
