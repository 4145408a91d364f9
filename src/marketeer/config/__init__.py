# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : __init__.py
#   file_relpath : src/marketeer/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Configuration and logging for the unlocker.

Build a configuration with `MutableConfig.from_defaults()`, optionally overlay a
TOML file with `MutableConfig.apply_toml_file()`, then `freeze()` it into the
immutable `Config` consumed by the pipeline.
"""

from __future__ import annotations

from marketeer.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
