# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : model.py
#   file_relpath : src/marketeer/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Immutable runtime configuration and its mutable builder.

`Config` is the frozen snapshot the pipeline reads. `MutableConfig` collects
defaults and overrides (TOML file, CLI flags) and validates them in `freeze()`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from marketeer.config.loaders import load_config_table
from marketeer.config.logging import get_logger
from marketeer.constants import (
    BACKUP_SUFFIX,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_COMPRESSION_LEVEL,
    DEFAULT_STOCK_ID,
    FLAGS_DELIMITER,
    UNLOCK_FLAG,
)
from marketeer.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from marketeer.config.logging import MarketeerLogger

logger: MarketeerLogger = get_logger(__name__)

STRING_KEYS: tuple[str, ...] = ("stock_id", "unlock_flag", "flags_delimiter", "backup_suffix")
INT_KEYS: tuple[str, ...] = ("compression_level", "chunk_size")


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        stock_id (str): ``stockid`` value identifying black marketeers.
        unlock_flag (str): Token whose presence in ``traits/@flags`` means unlocked.
        flags_delimiter (str): Separator placed before the appended token.
        backup_suffix (str): Suffix appended to the save file name for the backup.
        compression_level (int): gzip compression level (0-9) used when saving.
        chunk_size (int): Streaming chunk size in bytes; cancellation is checked per chunk.
        dry_run (bool): When True, nothing is written (no backup, no save).
        config_files (tuple[Path, ...]): TOML files merged into this configuration.
    """

    stock_id: str
    unlock_flag: str
    flags_delimiter: str
    backup_suffix: str
    compression_level: int
    chunk_size: int
    dry_run: bool = False
    config_files: tuple[Path, ...] = ()


@dataclass
class MutableConfig:
    """Mutable configuration builder; see `Config` for field meanings."""

    stock_id: str = DEFAULT_STOCK_ID
    unlock_flag: str = UNLOCK_FLAG
    flags_delimiter: str = FLAGS_DELIMITER
    backup_suffix: str = BACKUP_SUFFIX
    compression_level: int = DEFAULT_COMPRESSION_LEVEL
    chunk_size: int = DEFAULT_CHUNK_SIZE
    dry_run: bool = False
    config_files: list[Path] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls()

    def apply_table(self, table: dict[str, Any], *, source: str = "<table>") -> MutableConfig:
        """Overlay values from a plain TOML table.

        Unknown keys are logged and ignored; values of the wrong type raise.

        Args:
            table (dict[str, Any]): Parsed TOML table.
            source (str): Description of the origin, used in messages.

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        for key, value in table.items():
            if key in STRING_KEYS:
                if not isinstance(value, str):
                    raise ConfigError(f"{source}: '{key}' must be a string, got {value!r}")
                setattr(self, key, value)
            elif key in INT_KEYS:
                # bool is an int subclass; reject it explicitly
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigError(f"{source}: '{key}' must be an integer, got {value!r}")
                setattr(self, key, int(value))
            else:
                logger.warning("%s: ignoring unknown configuration key '%s'", source, key)
        return self

    def apply_toml_file(self, path: Path) -> MutableConfig:
        """Overlay values from a TOML configuration file.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        self.apply_table(load_config_table(path), source=str(path))
        self.config_files.append(path)
        return self

    def freeze(self) -> Config:
        """Validate this builder and return an immutable `Config`.

        Raises:
            ConfigError: If a value is out of range or empty.
        """
        for key in ("stock_id", "unlock_flag", "backup_suffix"):
            if not getattr(self, key):
                raise ConfigError(f"'{key}' must not be empty")
        if not 0 <= self.compression_level <= 9:
            raise ConfigError(
                f"'compression_level' must be between 0 and 9, got {self.compression_level}"
            )
        if self.chunk_size <= 0:
            raise ConfigError(f"'chunk_size' must be positive, got {self.chunk_size}")

        return Config(
            stock_id=self.stock_id,
            unlock_flag=self.unlock_flag,
            flags_delimiter=self.flags_delimiter,
            backup_suffix=self.backup_suffix,
            compression_level=self.compression_level,
            chunk_size=self.chunk_size,
            dry_run=self.dry_run,
            config_files=tuple(self.config_files),
        )
