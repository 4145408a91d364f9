# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : diagnostics.py
#   file_relpath : src/marketeer/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Structured diagnostics collected while processing a save file."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message with a severity level."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return ``"level: message"``, optionally colored."""
        text = f"{self.level.value}: {self.message}"
        return self.level.color(text) if color else text
