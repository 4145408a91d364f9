# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : options.py
#   file_relpath : src/marketeer/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Reusable CLI options and their resolution logic."""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from marketeer.cli.errors import MarketeerUsageError

P = ParamSpec("P")
R = TypeVar("R")

# Program-output verbosity levels
QUIET = -1
NORMAL = 0
VERBOSE = 1
DETAILED = 2


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        One of ``QUIET``, ``NORMAL``, ``VERBOSE`` or ``DETAILED``.

    Raises:
        MarketeerUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise MarketeerUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return QUIET
    return min(verbose_count, DETAILED)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for per-stage status.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress progress output; only errors are printed.",
    )(f)
    return f
