# topmark:header:start
#
#   project      : StatemLog
#   file         : main.py
#   file_relpath : src/statemlog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatemLog Click CLI: group-level options plus subcommands.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` for the subcommands to share.
"""

from __future__ import annotations

import click

from statemlog.cli.commands.config import config_command
from statemlog.cli.commands.translate import translate_command
from statemlog.cli.commands.version import version_command
from statemlog.cli.console import ClickConsole
from statemlog.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from statemlog.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # Internal logging: the environment wins over the CLI flags
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env or level_cli
    setup_logging(level=ctx.obj["log_level"])

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="StatemLog CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the StatemLog CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'statemlog translate EVENT_FILE' to translate a crash report.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(translate_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
