# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : test_status_and_errors.py
#   file_relpath : tests/unit/test_status_and_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Tests for status enums, diagnostics and error classification."""

from __future__ import annotations

from marketeer.core.diagnostics import Diagnostic, DiagnosticLevel
from marketeer.core.errors import (
    ConfigError,
    ErrorKind,
    MarketeerError,
    SaveFormatError,
    classify_os_error,
)
from marketeer.pipeline.status import (
    Axis,
    BackupStatus,
    CompressStatus,
    SaveProcessingStatus,
)
from tests.conftest import parametrize


def test_colored_status_value_and_styling() -> None:
    assert BackupStatus.CREATED.value == "backup created"
    assert BackupStatus.CREATED == "backup created"
    assert BackupStatus.CREATED.styled(enabled=False) == "backup created"
    assert "backup created" in BackupStatus.CREATED.styled(enabled=True)


def test_status_to_dict_lists_every_axis() -> None:
    status = SaveProcessingStatus()
    status.compress = CompressStatus.WRITTEN

    d = status.to_dict()

    assert list(d) == [axis.value for axis in Axis]
    assert d["backup"] == "PENDING"
    assert d["compress"] == "WRITTEN"


def test_diagnostic_render() -> None:
    diag = Diagnostic(DiagnosticLevel.WARNING, "careful")

    assert diag.render() == "warning: careful"
    assert "careful" in diag.render(color=True)


@parametrize(
    "exc, kind",
    [
        (FileNotFoundError(2, "No such file"), ErrorKind.NOT_FOUND),
        (PermissionError(13, "Permission denied"), ErrorKind.PERMISSION),
        (IsADirectoryError(21, "Is a directory"), ErrorKind.IO),
        (OSError(5, "Input/output error"), ErrorKind.IO),
    ],
)
def test_classify_os_error(exc: OSError, kind: ErrorKind) -> None:
    assert classify_os_error(exc) == kind


def test_error_kinds_on_exceptions() -> None:
    assert ConfigError("x").kind == ErrorKind.CONFIG
    assert SaveFormatError("x").kind == ErrorKind.FORMAT
    assert isinstance(ConfigError("x"), ValueError)
    assert issubclass(SaveFormatError, MarketeerError)
