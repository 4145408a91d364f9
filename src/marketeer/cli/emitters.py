# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : emitters.py
#   file_relpath : src/marketeer/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Human-readable rendering of a finished run.

Messages are derived from the per-stage statuses recorded on the context, so
a run that aborts early prints only the stages it reached. The output is meant
for people and is not a stable, machine-parseable format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marketeer.cli.options import DETAILED, QUIET, VERBOSE
from marketeer.pipeline.status import (
    Axis,
    BackupStatus,
    CompressStatus,
    DecompressStatus,
    ParseStatus,
    UnlockStatus,
)
from marketeer.pipeline.steps.unlocker import UnlockOutcome

if TYPE_CHECKING:
    from marketeer.cli.console import ConsoleLike
    from marketeer.pipeline.context import ProcessingContext
    from marketeer.pipeline.steps.unlocker import MarketeerReport


def marketeer_line(report: MarketeerReport) -> str | None:
    """Return the console line for one marketeer, or None when it was skipped."""
    who = f"Marketeer '{report.name}' ({report.code}) of faction '{report.owner}'"
    if report.outcome == UnlockOutcome.UNLOCKED:
        return f"{who} has been unlocked."
    if report.outcome == UnlockOutcome.ALREADY_UNLOCKED:
        return f"{who} is already unlocked."
    return None


def progress_lines(ctx: ProcessingContext) -> list[str]:
    """Return the progress messages for every stage the run reached."""
    st = ctx.status
    lines: list[str] = []

    if st.backup == BackupStatus.CREATED:
        lines.append("Creating backup of the save file...")

    if st.decompress != DecompressStatus.PENDING:
        lines += ["Loading save file...", "Decompressing save file..."]
    if st.decompress == DecompressStatus.OK:
        lines.append("Decompression complete.")
    if st.parse == ParseStatus.OK:
        lines.append("Save file loaded.")

    if st.unlock != UnlockStatus.PENDING:
        lines.append(f"Found {ctx.found_count} black marketeers.")
        lines += [line for m in ctx.marketeers if (line := marketeer_line(m)) is not None]

    if st.compress == CompressStatus.SKIPPED:
        lines.append("Dry run: save file not modified.")
    elif st.compress != CompressStatus.PENDING:
        lines += ["Saving modified save file...", "Compressing save file..."]
        if st.compress == CompressStatus.WRITTEN:
            lines += ["Compression complete.", "Save file saved."]
    return lines


def emit_run(console: ConsoleLike, ctx: ProcessingContext, verbosity: int) -> None:
    """Print the outcome of a run.

    Args:
        console (ConsoleLike): Output console.
        ctx (ProcessingContext): The finished processing context.
        verbosity (int): Program-output verbosity from `resolve_verbosity`.
    """
    if verbosity <= QUIET:
        return

    for line in progress_lines(ctx):
        console.print(line)

    if verbosity >= VERBOSE:
        console.print()
        console.print(console.styled(f"Summary for {ctx.path}:", bold=True))
        console.print(f"  found    : {ctx.found_count}")
        console.print(f"  unlocked : {ctx.unlocked_count}")
        console.print(f"  backup   : {ctx.backup_path}")

    if verbosity >= DETAILED:
        console.print(console.styled("Stages:", bold=True))
        enable_color = bool(getattr(console, "enable_color", False))
        for axis in Axis:
            status = getattr(ctx.status, axis.value)
            console.print(f"  {axis.value:<10} : {status.styled(enabled=enable_color)}")
        for diag in ctx.diagnostics:
            console.print(f"  {diag.render(color=enable_color)}")
