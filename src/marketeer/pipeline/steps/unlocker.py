# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : unlocker.py
#   file_relpath : src/marketeer/pipeline/steps/unlocker.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Unlocker step: mark every black marketeer's trades as visible.

A black marketeer is any ``component`` element below the document root whose
``stockid`` attribute equals the configured stock id (``default_shadyguy``).
Its first ``traits`` child carries a ``flags`` attribute, a ``|``-joined token
string. The marketeer counts as unlocked when that string *contains*
``tradesvisible``; otherwise ``|tradesvisible`` is appended.

The presence check is a substring test, not a token-set test: a longer token
that happens to contain ``tradesvisible`` is treated as already unlocked.

Axes written:
  - unlock

Sets:
  - UnlockStatus: {CHANGED, UNCHANGED}
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from marketeer.config.logging import get_logger
from marketeer.constants import (
    CODE_ATTR,
    COMPONENT_TAG,
    DEFAULT_STOCK_ID,
    FLAGS_ATTR,
    FLAGS_DELIMITER,
    NAME_ATTR,
    OWNER_ATTR,
    STOCKID_ATTR,
    TRAITS_TAG,
    UNKNOWN_VALUE,
    UNLOCK_FLAG,
)
from marketeer.pipeline.status import Axis, ParseStatus, UnlockStatus
from marketeer.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET
    from collections.abc import Iterator

    from marketeer.config.logging import MarketeerLogger
    from marketeer.pipeline.context import ProcessingContext

logger: MarketeerLogger = get_logger(__name__)


class UnlockOutcome(str, Enum):
    """What happened to a single marketeer."""

    UNLOCKED = "unlocked"
    ALREADY_UNLOCKED = "already unlocked"
    NO_TRAITS = "no traits flags"


@dataclass(frozen=True)
class MarketeerReport:
    """Per-marketeer result, in document order."""

    owner: str
    name: str
    code: str
    outcome: UnlockOutcome
    flags_before: str | None = None
    flags_after: str | None = None


def find_marketeers(root: ET.Element, stock_id: str = DEFAULT_STOCK_ID) -> Iterator[ET.Element]:
    """Yield descendant ``component`` elements whose ``stockid`` equals ``stock_id``.

    The root element itself is never yielded. Matching is exact and
    case-sensitive.
    """
    for element in root.iter(COMPONENT_TAG):
        if element is root:
            continue
        if element.get(STOCKID_ATTR) == stock_id:
            yield element


def unlock_marketeer(
    marketeer: ET.Element,
    *,
    flag: str = UNLOCK_FLAG,
    delimiter: str = FLAGS_DELIMITER,
) -> MarketeerReport:
    """Append ``flag`` to the marketeer's traits flags unless already present.

    Args:
        marketeer (ET.Element): A ``component`` element selected by `find_marketeers`.
        flag (str): The token that makes trades visible.
        delimiter (str): Separator inserted before the appended token.

    Returns:
        MarketeerReport: The outcome with the flags before and after.
    """
    owner = marketeer.get(OWNER_ATTR, UNKNOWN_VALUE)
    name = marketeer.get(NAME_ATTR, UNKNOWN_VALUE)
    code = marketeer.get(CODE_ATTR, UNKNOWN_VALUE)

    traits = marketeer.find(TRAITS_TAG)
    flags = traits.get(FLAGS_ATTR) if traits is not None else None

    if traits is None or flags is None:
        return MarketeerReport(owner, name, code, UnlockOutcome.NO_TRAITS)

    if flag in flags:
        return MarketeerReport(owner, name, code, UnlockOutcome.ALREADY_UNLOCKED, flags, flags)

    updated = flags + delimiter + flag
    traits.set(FLAGS_ATTR, updated)
    return MarketeerReport(owner, name, code, UnlockOutcome.UNLOCKED, flags, updated)


class UnlockStep(BaseStep):
    """Unlock every marketeer in ``ctx.tree`` and record one report each."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.UNLOCK)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Proceed only when a parsed document is available."""
        return (
            super().may_proceed(ctx) and ctx.status.parse == ParseStatus.OK and ctx.tree is not None
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Apply `unlock_marketeer` to each marketeer in document order.

        Args:
            ctx (ProcessingContext): The processing context for the current run.
        """
        assert ctx.tree is not None  # guaranteed by may_proceed()
        cfg = ctx.config

        marketeers = list(find_marketeers(ctx.tree.getroot(), cfg.stock_id))
        logger.info("Found %d black marketeers", len(marketeers))

        for element in marketeers:
            report = unlock_marketeer(element, flag=cfg.unlock_flag, delimiter=cfg.flags_delimiter)
            logger.debug("Marketeer %s (%s): %s", report.name, report.code, report.outcome.value)
            ctx.marketeers.append(report)

        ctx.status.unlock = UnlockStatus.CHANGED if ctx.unlocked_count else UnlockStatus.UNCHANGED
