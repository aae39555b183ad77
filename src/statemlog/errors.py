# topmark:header:start
#
#   project      : StatemLog
#   file         : errors.py
#   file_relpath : src/statemlog/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the StatemLog library layer.

CLI-facing exceptions live in `statemlog.cli.errors`; the classes here never
depend on Click so the translator stays importable from any host.
"""

from __future__ import annotations


class StatemLogError(Exception):
    """Base class for all StatemLog library errors."""


class MalformedReport(StatemLogError):
    """A matched termination report does not decompose into the expected sections.

    Raised by the normalizer and always downgraded to "not handled" by
    `statemlog.translator.translate`; it never crosses the translator boundary.

    Attributes:
        expected (int | None): Number of argument slots the template declares.
        actual (int | None): Number of positional arguments supplied.
    """

    def __init__(self, message: str, *, expected: int | None = None, actual: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ConfigError(StatemLogError):
    """Configuration values have the wrong type or are out of range."""


class EventFileError(StatemLogError):
    """An event document could not be read or does not describe a diagnostic event."""
