# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : test_logging_env.py
#   file_relpath : tests/config/test_logging_env.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Tests for log-level resolution and logger setup."""

from __future__ import annotations

import logging
import sys

import pytest

from marketeer.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    MarketeerLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("debug", logging.DEBUG),
        (" trace ", TRACE_LEVEL),
        ("warn", logging.WARNING),
        ("10", 10),
        ("loud", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv("MARKETEER_LOG_LEVEL", value)

    assert resolve_env_log_level() == expected


def test_unset_env_resolves_to_none() -> None:
    assert resolve_env_log_level() is None


def test_setup_logging_defaults_to_critical() -> None:
    try:
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.CRITICAL
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert isinstance(handler.formatter, ChalkFormatter)
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_setup_logging_honors_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKETEER_LOG_LEVEL", "INFO")
    try:
        setup_logging()
        assert logging.getLogger().level == logging.INFO
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_get_logger_has_trace() -> None:
    logger = get_logger("marketeer.test")

    assert isinstance(logger, MarketeerLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_chalk_formatter_keeps_message() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello %s", ("world",), None)

    assert "hello world" in ChalkFormatter("%(message)s").format(record)
