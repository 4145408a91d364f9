# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : loaders.py
#   file_relpath : src/marketeer/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Load TOML configuration files.

A configuration file either holds the keys at top level (``marketeer.toml``) or
under a ``[tool.marketeer]`` table (``pyproject.toml`` style). Parsing is done
with `tomlkit` and returned as a plain `dict`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from marketeer.config.logging import get_logger
from marketeer.constants import TOOL_TABLE
from marketeer.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from marketeer.config.logging import MarketeerLogger

logger: MarketeerLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): The TOML file to read.

    Returns:
        dict[str, Any]: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    logger.debug("Loaded config file %s", path)
    return doc.unwrap()


def extract_config_table(doc: dict[str, Any]) -> dict[str, Any]:
    """Return the unlocker's table from a parsed TOML document.

    The ``[tool.marketeer]`` table wins when present; otherwise the top-level
    keys (minus other tables) are used.
    """
    tool, name = TOOL_TABLE
    tool_table = doc.get(tool)
    if isinstance(tool_table, dict) and isinstance(tool_table.get(name), dict):
        return dict(tool_table[name])
    return {k: v for k, v in doc.items() if not isinstance(v, dict)}


def load_config_table(path: Path) -> dict[str, Any]:
    """Read ``path`` and return the unlocker's configuration table."""
    return extract_config_table(load_toml_dict(path))
