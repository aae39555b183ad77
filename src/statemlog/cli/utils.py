# topmark:header:start
#
#   project      : StatemLog
#   file         : utils.py
#   file_relpath : src/statemlog/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by StatemLog CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from statemlog.cli.errors import StatemLogConfigError, StatemLogFileNotFoundError
from statemlog.config.loaders import load_config
from statemlog.errors import ConfigError

if TYPE_CHECKING:
    from statemlog.cli.console import ConsoleLike
    from statemlog.config.model import Config


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console placed on the root Click context by the group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def resolve_config(config_path: str | None) -> Config:
    """Load the effective configuration for a command.

    Raises:
        StatemLogFileNotFoundError: If an explicit ``--config`` file does not exist.
        StatemLogConfigError: If the configuration carries invalid values.
    """
    path: Path | None = Path(config_path) if config_path else None
    if path is not None and not path.is_file():
        raise StatemLogFileNotFoundError(f"Configuration file not found: {path}")
    try:
        return load_config(path)
    except ConfigError as exc:
        raise StatemLogConfigError(str(exc)) from exc
