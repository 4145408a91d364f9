# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : main.py
#   file_relpath : src/marketeer/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Click entry point: ``x4-marketeer-unlocker <path to X4 save file>``.

Exactly one save file is expected. Any other number of paths prints the usage
line and exits with status 0; this mirrors the tool's historical behavior and
is kept until there is a decision to report misuse as an error.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from marketeer.api import unlock_save
from marketeer.cli.console import ClickConsole
from marketeer.cli.emitters import emit_run
from marketeer.cli.errors import MarketeerConfigError, error_for_kind
from marketeer.cli.options import common_verbose_options, resolve_verbosity
from marketeer.config import Config, MutableConfig
from marketeer.config.logging import get_logger, resolve_env_log_level, setup_logging
from marketeer.constants import MARKETEER_VERSION, PROG_NAME, USAGE_TEXT
from marketeer.core.cancellation import CancellationToken, cancel_on_interrupt
from marketeer.core.errors import ConfigError
from marketeer.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from marketeer.cli.console import ConsoleLike
    from marketeer.config.logging import MarketeerLogger

logger: MarketeerLogger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize verbosity, logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["console"] = ClickConsole(enable_color=not no_color)
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = False if no_color else None


def build_config(config_file: Path | None, *, dry_run: bool) -> Config:
    """Build the effective configuration from defaults, a TOML file and flags.

    Raises:
        MarketeerConfigError: If the configuration file is unreadable or invalid.
    """
    builder = MutableConfig.from_defaults()
    try:
        if config_file is not None:
            builder.apply_toml_file(config_file)
        builder.dry_run = dry_run
        return builder.freeze()
    except ConfigError as exc:
        raise MarketeerConfigError(str(exc)) from exc


@click.command(
    name=PROG_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Unlock the trade offers of every black marketeer in an X4 save file.",
)
@click.argument(
    "save_files",
    nargs=-1,
    metavar="SAVE_FILE",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML configuration file (top-level keys or a [tool.marketeer] table).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Report what would be unlocked without creating a backup or writing the save.",
)
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@common_verbose_options
@click.version_option(MARKETEER_VERSION, "--version", prog_name=PROG_NAME)
@click.pass_context
def cli(
    ctx: click.Context,
    save_files: tuple[Path, ...],
    config_file: Path | None,
    dry_run: bool,
    no_color: bool,
    verbose: int,
    quiet: int,
) -> None:
    """Entry point for the unlocker CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if len(save_files) != 1:
        console.print(USAGE_TEXT)
        return

    config = build_config(config_file, dry_run=dry_run)
    logger.debug("Effective config: %s", config)

    token = CancellationToken()
    with cancel_on_interrupt(token):
        result = unlock_save(save_files[0], config=config, cancel=token)

    emit_run(console, result, ctx.obj["verbosity_level"])

    if not result.succeeded:
        raise error_for_kind(result.error_kind, result.flow.reason)

    if dry_run and result.unlocked_count:
        ctx.exit(ExitCode.WOULD_CHANGE)


if __name__ == "__main__":
    cli()
