# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : test_config_loaders.py
#   file_relpath : tests/config/test_config_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Tests for reading configuration tables from TOML files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from marketeer.config.loaders import extract_config_table, load_config_table, load_toml_dict
from marketeer.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_top_level_keys(tmp_path: Path) -> None:
    path = tmp_path / "marketeer.toml"
    path.write_text('stock_id = "x"\n[other]\nkey = 1\n', encoding="utf-8")

    assert load_config_table(path) == {"stock_id": "x"}


def test_tool_table_wins(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        'stock_id = "ignored"\n\n[tool.marketeer]\nstock_id = "y"\nchunk_size = 10\n',
        encoding="utf-8",
    )

    assert load_config_table(path) == {"stock_id": "y", "chunk_size": 10}


def test_unwrapped_to_plain_types(tmp_path: Path) -> None:
    path = tmp_path / "c.toml"
    path.write_text('chunk_size = 42\nbackup_suffix = ".b"\n', encoding="utf-8")

    doc = load_toml_dict(path)

    assert type(doc) is dict
    assert type(doc["chunk_size"]) is int
    assert type(doc["backup_suffix"]) is str


def test_extract_ignores_unrelated_tool_tables() -> None:
    doc = {"tool": {"ruff": {"line-length": 100}}, "chunk_size": 8}

    assert extract_config_table(doc) == {"chunk_size": 8}


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("stock_id = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_toml_dict(path)


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_toml_dict(tmp_path / "absent.toml")
