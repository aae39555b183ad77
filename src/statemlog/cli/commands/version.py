# topmark:header:start
#
#   project      : StatemLog
#   file         : version.py
#   file_relpath : src/statemlog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatemLog `version` command.

Prints the current StatemLog version as installed in the active Python environment.
"""

from __future__ import annotations

import logging

import click

from statemlog.cli.utils import get_console
from statemlog.constants import STATEMLOG_VERSION


@click.command(
    name="version",
    help="Show the current version of StatemLog.",
)
def version_command() -> None:
    """Show the current version of StatemLog."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        console.print(console.styled("StatemLog version:", bold=True, underline=True))
        console.print(f"    {console.styled(STATEMLOG_VERSION, bold=True)}")
    else:
        console.print(console.styled(STATEMLOG_VERSION, bold=True))
