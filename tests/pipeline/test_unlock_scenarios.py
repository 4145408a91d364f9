# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : test_unlock_scenarios.py
#   file_relpath : tests/pipeline/test_unlock_scenarios.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""End-to-end runs of the unlock pipeline through `marketeer.api.unlock_save`.

Covers the four reference scenarios (locked, already unlocked, no marketeers,
missing input) plus dry runs and the halting behavior of later steps.
"""

from __future__ import annotations

import gzip
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from marketeer.api import unlock_save
from marketeer.core.cancellation import CancellationToken
from marketeer.core.errors import ErrorKind
from marketeer.pipeline.status import (
    BackupStatus,
    CompressStatus,
    DecompressStatus,
    ParseStatus,
    SerializeStatus,
    UnlockStatus,
)
from marketeer.pipeline.steps.unlocker import UnlockOutcome
from tests.conftest import (
    make_config,
    mark_integration,
    marketeer_xml,
    read_save,
    save_xml,
    traits_flags,
    write_save,
)

if TYPE_CHECKING:
    from pathlib import Path


@mark_integration
def test_locked_marketeer_is_unlocked(save_file: Path) -> None:
    """A marketeer with ``flags="tradedock"`` gains ``|tradesvisible``."""
    ctx = unlock_save(save_file)

    assert ctx.succeeded
    assert ctx.found_count == 1
    assert ctx.unlocked_count == 1
    assert traits_flags(read_save(save_file)) == ["tradedock|tradesvisible"]
    assert traits_flags(read_save(ctx.backup_path)) == ["tradedock"]
    assert ctx.steps == [
        "BackupStep",
        "DecompressStep",
        "ParseStep",
        "UnlockStep",
        "SerializeStep",
        "CompressStep",
    ]


@mark_integration
def test_already_unlocked_marketeer_is_unchanged(tmp_path: Path) -> None:
    path = write_save(
        tmp_path / "save.xml.gz", save_xml(marketeer_xml(flags="tradedock|tradesvisible"))
    )

    ctx = unlock_save(path)

    assert ctx.succeeded
    assert ctx.status.unlock == UnlockStatus.UNCHANGED
    assert [m.outcome for m in ctx.marketeers] == [UnlockOutcome.ALREADY_UNLOCKED]
    assert traits_flags(read_save(path)) == ["tradedock|tradesvisible"]


@mark_integration
def test_no_marketeers_round_trips_document(tmp_path: Path) -> None:
    """Without marketeers the document survives the parse/serialize round trip."""
    original = save_xml()
    path = write_save(tmp_path / "save.xml.gz", original)

    ctx = unlock_save(path)

    assert ctx.succeeded
    assert ctx.found_count == 0
    # the file is still rewritten
    assert ctx.status.compress == CompressStatus.WRITTEN
    assert ET.tostring(read_save(path)) == ET.tostring(ET.fromstring(original))


@mark_integration
def test_comments_and_processing_instructions_survive(tmp_path: Path) -> None:
    original = (
        "<savegame><!-- keep me --><?x4 hint?>"
        '<component class="npc" stockid="x"/></savegame>'
    )
    path = write_save(tmp_path / "save.xml.gz", original)

    ctx = unlock_save(path)

    assert ctx.succeeded
    assert ctx.found_count == 0
    rewritten = gzip.decompress(path.read_bytes())
    assert b"<!-- keep me -->" in rewritten
    assert b"<?x4 hint?>" in rewritten


@mark_integration
def test_missing_input_aborts_before_backup(tmp_path: Path) -> None:
    path = tmp_path / "missing.xml.gz"

    ctx = unlock_save(path)

    assert not ctx.succeeded
    assert ctx.error_kind == ErrorKind.NOT_FOUND
    assert ctx.status.backup == BackupStatus.FAILED
    assert ctx.status.decompress == DecompressStatus.PENDING
    assert not path.exists()
    assert not ctx.backup_path.exists()
    assert ctx.flow.at_step == "BackupStep"


@mark_integration
def test_halted_run_keeps_later_steps_pending(tmp_path: Path) -> None:
    """A format failure leaves later stages PENDING and the save untouched."""
    path = tmp_path / "bad.xml.gz"
    path.write_bytes(b"definitely not gzip")

    ctx = unlock_save(path)

    assert ctx.error_kind == ErrorKind.FORMAT
    assert ctx.status.backup == BackupStatus.CREATED
    assert ctx.status.decompress == DecompressStatus.INVALID
    assert ctx.status.parse == ParseStatus.PENDING
    assert ctx.status.unlock == UnlockStatus.PENDING
    assert ctx.status.serialize == SerializeStatus.PENDING
    assert ctx.status.compress == CompressStatus.PENDING
    assert path.read_bytes() == b"definitely not gzip"
    assert len(ctx.steps) == 6


@mark_integration
def test_dry_run_reports_without_writing(save_file: Path) -> None:
    before = save_file.read_bytes()

    ctx = unlock_save(save_file, dry_run=True)

    assert ctx.succeeded
    assert ctx.config.dry_run
    assert ctx.unlocked_count == 1
    assert ctx.status.backup == BackupStatus.SKIPPED
    assert ctx.status.compress == CompressStatus.SKIPPED
    assert save_file.read_bytes() == before
    assert not ctx.backup_path.exists()


@mark_integration
def test_existing_backup_is_preserved_across_runs(save_file: Path) -> None:
    pristine = save_file.read_bytes()

    unlock_save(save_file)
    ctx = unlock_save(save_file)

    assert ctx.status.backup == BackupStatus.EXISTS
    assert ctx.backup_path.read_bytes() == pristine


@mark_integration
def test_cancelled_run_leaves_save_untouched(save_file: Path) -> None:
    token = CancellationToken()
    token.cancel("test")
    before = save_file.read_bytes()

    ctx = unlock_save(save_file, cancel=token)

    assert ctx.error_kind == ErrorKind.CANCELLED
    assert save_file.read_bytes() == before


@mark_integration
def test_buffers_released_after_run(save_file: Path) -> None:
    ctx = unlock_save(save_file, config=make_config(chunk_size=16))

    assert ctx.decompressed is None
    assert ctx.tree is None
    assert ctx.serialized is None
    assert ctx.marketeers
    assert ctx.to_dict()["unlocked"] == 1
