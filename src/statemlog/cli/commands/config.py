# topmark:header:start
#
#   project      : StatemLog
#   file         : config.py
#   file_relpath : src/statemlog/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatemLog `config` command.

Prints the effective configuration (defaults layered with the discovered or
explicit TOML file) as a TOML document.
"""

from __future__ import annotations

import click

from statemlog.cli.options import config_file_option
from statemlog.cli.utils import get_console, resolve_config
from statemlog.config.loaders import to_toml


@click.command(
    name="config",
    help="Show the effective StatemLog configuration as TOML.",
)
@config_file_option
def config_command(*, config_path: str | None) -> None:
    """Print the effective configuration."""
    console = get_console(click.get_current_context())
    console.print(to_toml(resolve_config(config_path)), nl=False)
