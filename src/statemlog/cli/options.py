# topmark:header:start
#
#   project      : StatemLog
#   file         : options.py
#   file_relpath : src/statemlog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the StatemLog CLI.

This module centralizes reusable options (verbosity, color, log level,
output format) and their resolution logic, so commands and groups stay thin.
The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, NoReturn, ParamSpec, TypeVar

import click

from statemlog.cli.errors import StatemLogUsageError
from statemlog.config.logging import LEVEL_NAMES, TRACE_LEVEL, parse_log_level

P = ParamSpec("P")
R = TypeVar("R")


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutputFormat(str, Enum):
    """Output format of ``statemlog translate``."""

    TEXT = "text"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The verbosity as a logging level.

    Raises:
        StatemLogUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise StatemLogUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Disables color for JSON output, honors ``--color``/``--no-color`` and the
    ``FORCE_COLOR``/``NO_COLOR`` environment variables, and otherwise enables
    color only when stdout is a TTY.
    """
    if output_format is OutputFormat.JSON:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


class LogLevelParam(click.ParamType):
    """Click parameter type accepting a level name (``debug``) or number (``10``)."""

    name = "level"

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | int,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> int:
        """Convert a level name or number to a numeric logging level."""
        level: int | None = parse_log_level(value)
        if level is None:
            self._fail_noreturn(
                f"Invalid level '{value}'. Use a number or one of: "
                f"{', '.join(name.lower() for name in LEVEL_NAMES)}",
                param,
                ctx,
            )
        return level


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def config_file_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --config option (explicit TOML configuration file)."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Configuration file (default: statemlog.toml or [tool.statemlog] in pyproject.toml).",
    )(f)
