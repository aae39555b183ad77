# topmark:header:start
#
#   project      : StatemLog
#   file         : errors.py
#   file_relpath : src/statemlog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the StatemLog CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. They prefer the project console when one is present on the Click
context (see `show()`), and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from statemlog.cli.exit_codes import ExitCode


class StatemLogCliError(click.ClickException):
    """Base class for all StatemLog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")  # pyright: ignore[reportUnknownMemberType]
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class StatemLogUsageError(StatemLogCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class StatemLogConfigError(StatemLogCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class StatemLogFileNotFoundError(StatemLogCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class StatemLogDataError(StatemLogCliError):
    """Error when an input document cannot be turned into a diagnostic event."""

    exit_code = ExitCode.DATA_ERROR
