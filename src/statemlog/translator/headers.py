# topmark:header:start
#
#   project      : StatemLog
#   file         : headers.py
#   file_relpath : src/statemlog/translator/headers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Section-header vocabulary for legacy termination report templates.

A legacy template looks like::

    ** State machine ~p terminating~n** Last event = ~p~n
    ** When server state  = ~p~n** Reason for termination = ~w:~p~n ...

Splitting it on its placeholders gives one literal segment per argument. The
header line inside each segment (``** Last event =``) names the field that the
argument following it fills. `SECTION_HEADERS` is consulted in order, and the
first prefix that matches wins. Segments without a header line (the ``:``
between class and reason, for instance) claim no field; the argument after
them was already claimed by the previous header.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from statemlog.config.logging import get_logger

if TYPE_CHECKING:
    from statemlog.config.logging import StatemLogger

logger: StatemLogger = get_logger(__name__)

PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"~t?[pws]")
NEWLINE_DIRECTIVE: Final[str] = "~n"
HEADER_MARK: Final[str] = "**"

# Ordered (header prefix, canonical field names) pairs.
SECTION_HEADERS: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    ("State machine", ("name",)),
    ("Last event", ("last_event",)),
    ("When server state", ("state",)),
    ("Reason for termination", ("class", "reason")),
    ("Callback mode", ("callback_mode",)),
    ("Queued", ("queued",)),
    ("Postponed", ("postponed",)),
    ("Stacktrace", ("stack",)),
    ("Time-outs", ("timeouts",)),
    ("Client", ("client", "client_stack")),
)


def split_template(template: str) -> list[str]:
    """Return the literal segments that precede each placeholder.

    The text after the last placeholder introduces no argument and is dropped.
    """
    return PLACEHOLDER_RE.split(template)[:-1]


def section_header(segment: str) -> str | None:
    """Return the header text announced by a literal segment, or None.

    The header is the first line of the segment that starts with ``**``, with
    the leading marks and the trailing ``=``/``:`` removed.
    """
    for line in segment.replace(NEWLINE_DIRECTIVE, "\n").splitlines():
        stripped: str = line.strip()
        if not stripped.startswith(HEADER_MARK):
            continue
        header: str = stripped.lstrip("*").rstrip("=:").strip()
        return header or None
    return None


def fields_for_segment(segment: str) -> tuple[str, ...]:
    """Return the canonical field names claimed by one literal segment."""
    header: str | None = section_header(segment)
    if header is None:
        return ()
    for prefix, fields in SECTION_HEADERS:
        if header.startswith(prefix):
            return fields
    logger.trace("Unrecognized report section header: %r", header)
    return ()


def template_fields(template: str) -> list[str]:
    """Return the ordered field names a template's arguments fill.

    Args:
        template (str): Legacy termination report template.

    Returns:
        list[str]: One name per argument slot, in argument order.
    """
    names: list[str] = []
    for segment in split_template(template):
        names.extend(fields_for_segment(segment))
    return names
