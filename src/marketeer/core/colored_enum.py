# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : colored_enum.py
#   file_relpath : src/marketeer/core/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""String enum whose members carry a colorizer for human-facing output.

Example:
    ```python
    from yachalk import chalk

    class BackupStatus(ColoredStrEnum):
        CREATED = ("backup created", chalk.green)

    BackupStatus.CREATED.value            # 'backup created'
    BackupStatus.CREATED.color("hello")   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with `yachalk.ChalkBuilder.__call__`."""

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a plain string, with the colorizer stored aside.

    Keeping `_value_` a scalar string preserves hashing, equality and `repr`;
    the colorizer is exposed through `color`.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def styled(self, *, enabled: bool = True) -> str:
        """Return the value, colorized when ``enabled``."""
        return self._color(self._value_) if enabled else self._value_
